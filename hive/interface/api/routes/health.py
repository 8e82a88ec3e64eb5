"""Liveness check."""

from datetime import datetime, timezone
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from hive.adapter.realtime import RoomRegistry
from hive.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    timestamp: datetime
    environment: str
    git_sha: str
    open_rooms: int  # Team rooms with at least one live WebSocket


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], rooms: FromDishka[RoomRegistry]
) -> HealthResponse:
    """Report that the process is up. Needs no token and touches no database."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        git_sha=settings.git_sha,
        open_rooms=rooms.room_count,
    )
