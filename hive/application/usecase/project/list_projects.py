"""List projects use case."""

from pydantic import BaseModel

from hive.application.view import ProjectView
from hive.domain.model import User
from hive.domain.service import ProjectService
from hive.domain.service.access import ALL_ROLES, require_role


class ListProjectsRequest(BaseModel):
    """List projects request."""

    caller: User


class ListProjectsResponse(BaseModel):
    """List projects response."""

    projects: list[ProjectView]


class ListProjectsUseCase:
    """Use case for listing the caller's team projects."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        """List projects of the caller's team, newest first."""
        require_role(request.caller, ALL_ROLES)
        if request.caller.team_id is None:
            return ListProjectsResponse(projects=[])
        projects = await self.project_service.list_projects(request.caller.team_id)
        return ListProjectsResponse(projects=[ProjectView.of(p) for p in projects])
