"""Activity feed routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from hive.application.usecase.activity import (
    GetTeamActivitiesRequest,
    GetTeamActivitiesUseCase,
    GetUserActivitiesRequest,
    GetUserActivitiesUseCase,
)
from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.application.view import ActivityView
from hive.domain.error import DomainError
from hive.interface.api.caller import authenticate
from hive.interface.api.envelope import Envelope
from hive.interface.error import http_error

router = APIRouter(prefix="/activities", tags=["activities"], route_class=DishkaRoute)


@router.get("/team", response_model=Envelope[list[ActivityView]])
async def get_team_activities(
    get_team_activities_use_case: FromDishka[GetTeamActivitiesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    limit: int = Query(default=20, ge=1, le=100),
) -> Envelope[list[ActivityView]]:
    """Recent activity of the caller's team, newest first."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await get_team_activities_use_case.execute(
            GetTeamActivitiesRequest(caller=caller, limit=limit)
        )
    except DomainError as e:
        raise http_error(e, "Team activities") from e
    return Envelope(data=result.activities)


@router.get("/user", response_model=Envelope[list[ActivityView]])
async def get_user_activities(
    get_user_activities_use_case: FromDishka[GetUserActivitiesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    limit: int = Query(default=20, ge=1, le=100),
) -> Envelope[list[ActivityView]]:
    """Recent activity performed by the caller, newest first."""
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await get_user_activities_use_case.execute(
            GetUserActivitiesRequest(caller=caller, limit=limit)
        )
    except DomainError as e:
        raise http_error(e, "User activities") from e
    return Envelope(data=result.activities)
