"""Create project use case."""

from pydantic import BaseModel

from hive.application.view import ProjectView
from hive.domain.model import User
from hive.domain.service import ProjectService
from hive.domain.service.access import MANAGERS, require_role
from hive.domain.value import ProjectStatus


class CreateProjectRequest(BaseModel):
    """Create project request."""

    caller: User
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.ACTIVE


class CreateProjectUseCase:
    """Use case for creating a project in the caller's team."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: CreateProjectRequest) -> ProjectView:
        """Create a project.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN or MANAGER
        """
        require_role(request.caller, MANAGERS)
        project = await self.project_service.create_project(
            actor=request.caller,
            name=request.name,
            description=request.description,
            status=request.status,
        )
        return ProjectView.of(project)
