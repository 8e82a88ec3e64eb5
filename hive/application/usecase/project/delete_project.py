"""Delete project use case."""

from uuid import UUID

from pydantic import BaseModel

from hive.domain.model import User
from hive.domain.service import ProjectService
from hive.domain.service.access import ADMINS, require_role
from hive.domain.value import ProjectId


class DeleteProjectRequest(BaseModel):
    """Delete project request."""

    caller: User
    project_id: UUID


class DeleteProjectUseCase:
    """Use case for deleting a project and its tasks (ADMIN only)."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: DeleteProjectRequest) -> None:
        """Delete a project.

        Raises:
            NotAuthorizedError: If the caller is not ADMIN
            NotFoundError: If the project is not in the caller's team
        """
        require_role(request.caller, ADMINS)
        await self.project_service.delete_project(
            request.caller, ProjectId(request.project_id)
        )
