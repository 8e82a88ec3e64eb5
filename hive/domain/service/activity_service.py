"""Activity audit domain service."""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

import logfire

from hive.domain.model import Activity
from hive.domain.repository import ActivityRepository
from hive.domain.value import ActivityId, ActivityType, EntityType, TeamId, UserId

from .base import Service


class ActivityService(Service):
    """Domain service for the append-only activity log.

    Recording is best-effort: a failed write is logged and never fails the
    operation that triggered it.
    """

    def __init__(self, activity_repository: ActivityRepository) -> None:
        """Initialize activity service.

        Args:
            activity_repository: Activity repository
        """
        self.activity_repository = activity_repository

    async def record(
        self,
        type: ActivityType,
        description: str,
        actor_id: UserId,
        team_id: TeamId,
        entity_id: UUID | None = None,
        entity_type: EntityType | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Activity | None:
        """Append an activity record.

        Args:
            type: Activity type
            description: Human readable summary
            actor_id: User who performed the action
            team_id: Team the action happened in
            entity_id: Optional affected entity
            entity_type: Type of the affected entity
            metadata: Free-form details

        Returns:
            The stored activity, or None if recording failed
        """
        with logfire.span(
            "activity_service.record",
            type=type.value,
            actor_id=str(actor_id),
            team_id=str(team_id),
        ):
            try:
                activity = Activity(
                    id=ActivityId(uuid4()),
                    type=type,
                    description=description[:500],
                    actor_id=actor_id,
                    team_id=team_id,
                    entity_id=entity_id,
                    entity_type=entity_type,
                    metadata=metadata or {},
                    created_at=datetime.now(timezone.utc),
                )
                return await self.activity_repository.append(activity)
            except Exception as e:
                logfire.error(
                    "Failed to record activity",
                    type=type.value,
                    actor_id=str(actor_id),
                    error=str(e),
                )
                return None

    async def for_team(self, team_id: TeamId, limit: int = 20) -> list[Activity]:
        """List a team's latest activities, newest first."""
        with logfire.span(
            "activity_service.for_team", team_id=str(team_id), limit=limit
        ):
            activities = await self.activity_repository.find_by_team(team_id, limit)
            logfire.info(
                "Team activities listed", team_id=str(team_id), count=len(activities)
            )
            return activities

    async def for_user(self, user_id: UserId, limit: int = 20) -> list[Activity]:
        """List a user's latest activities, newest first."""
        with logfire.span(
            "activity_service.for_user", user_id=str(user_id), limit=limit
        ):
            activities = await self.activity_repository.find_by_user(user_id, limit)
            logfire.info(
                "User activities listed", user_id=str(user_id), count=len(activities)
            )
            return activities
