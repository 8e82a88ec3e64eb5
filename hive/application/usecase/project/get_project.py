"""Get project use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.application.view import ProjectView
from hive.domain.error import NotFoundError
from hive.domain.model import User
from hive.domain.service import ProjectService
from hive.domain.service.access import ALL_ROLES, require_role
from hive.domain.value import ProjectId


class GetProjectRequest(BaseModel):
    """Get project request."""

    caller: User
    project_id: UUID


class GetProjectUseCase:
    """Use case for reading one project of the caller's team."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: GetProjectRequest) -> ProjectView:
        """Get a project.

        Raises:
            NotFoundError: If the project is not in the caller's team
        """
        require_role(request.caller, ALL_ROLES)
        if request.caller.team_id is None:
            raise NotFoundError("Project", str(request.project_id))
        project = await self.project_service.get_project(
            ProjectId(request.project_id), request.caller.team_id
        )
        return ProjectView.of(project)
