"""Get team users use case."""

from pydantic import BaseModel

from hive.application.view import UserView
from hive.domain.model import User
from hive.domain.service import UserService
from hive.domain.service.access import ALL_ROLES, require_role


class GetTeamUsersRequest(BaseModel):
    """Get team users request."""

    caller: User


class GetTeamUsersResponse(BaseModel):
    """Get team users response."""

    users: list[UserView]


class GetTeamUsersUseCase:
    """Use case for listing the caller's team members."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetTeamUsersRequest) -> GetTeamUsersResponse:
        """List team members ordered by role (ADMIN first), then name."""
        require_role(request.caller, ALL_ROLES)
        if request.caller.team_id is None:
            return GetTeamUsersResponse(users=[])
        users = await self.user_service.list_team(request.caller.team_id)
        return GetTeamUsersResponse(users=[UserView.of(u) for u in users])
