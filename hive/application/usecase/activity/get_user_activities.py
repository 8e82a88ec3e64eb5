"""Get user activities use case."""

from pydantic import BaseModel, Field

from hive.application.view import activity_views
from hive.domain.model import User
from hive.domain.service import ActivityService, UserService
from hive.domain.service.access import ALL_ROLES, require_role

from .get_team_activities import GetActivitiesResponse


class GetUserActivitiesRequest(BaseModel):
    """Get user activities request."""

    caller: User
    limit: int = Field(default=20, ge=1, le=100)


class GetUserActivitiesUseCase:
    """Use case for the caller's own activity feed."""

    def __init__(
        self, activity_service: ActivityService, user_service: UserService
    ) -> None:
        self.activity_service = activity_service
        self.user_service = user_service

    async def execute(self, request: GetUserActivitiesRequest) -> GetActivitiesResponse:
        """List the caller's latest activities, newest first."""
        require_role(request.caller, ALL_ROLES)
        activities = await self.activity_service.for_user(
            request.caller.id, request.limit
        )
        return GetActivitiesResponse(
            activities=await activity_views(activities, self.user_service)
        )
