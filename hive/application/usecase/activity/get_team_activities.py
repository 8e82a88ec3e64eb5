"""Get team activities use case."""

from pydantic import BaseModel, Field

from hive.application.view import ActivityView, activity_views
from hive.domain.model import User
from hive.domain.service import ActivityService, UserService
from hive.domain.service.access import ALL_ROLES, require_role


class GetTeamActivitiesRequest(BaseModel):
    """Get team activities request."""

    caller: User
    limit: int = Field(default=20, ge=1, le=100)


class GetActivitiesResponse(BaseModel):
    """Activity feed response."""

    activities: list[ActivityView]


class GetTeamActivitiesUseCase:
    """Use case for the caller's team activity feed."""

    def __init__(
        self, activity_service: ActivityService, user_service: UserService
    ) -> None:
        self.activity_service = activity_service
        self.user_service = user_service

    async def execute(self, request: GetTeamActivitiesRequest) -> GetActivitiesResponse:
        """List the team's latest activities, newest first."""
        require_role(request.caller, ALL_ROLES)
        if request.caller.team_id is None:
            return GetActivitiesResponse(activities=[])
        activities = await self.activity_service.for_team(
            request.caller.team_id, request.limit
        )
        return GetActivitiesResponse(
            activities=await activity_views(activities, self.user_service)
        )
