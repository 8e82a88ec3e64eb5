"""Activity entity: one immutable audit record of a domain mutation."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import ActivityId, ActivityType, EntityType, TeamId, UserId


class Activity(DomainModel):
    """Activity entity. Append-only."""

    id: ActivityId
    type: ActivityType
    description: str = Field(min_length=1, max_length=500)
    actor_id: UserId
    team_id: TeamId
    entity_id: Optional[UUID] = None
    entity_type: Optional[EntityType] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utc_now)
