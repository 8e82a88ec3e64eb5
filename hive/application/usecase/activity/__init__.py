"""Activity use cases."""

from .get_team_activities import (
    GetActivitiesResponse,
    GetTeamActivitiesRequest,
    GetTeamActivitiesUseCase,
)
from .get_user_activities import GetUserActivitiesRequest, GetUserActivitiesUseCase

__all__ = [
    "GetActivitiesResponse",
    "GetTeamActivitiesRequest",
    "GetTeamActivitiesUseCase",
    "GetUserActivitiesRequest",
    "GetUserActivitiesUseCase",
]
