"""Chat message entity. Append-only."""

from datetime import datetime

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import MessageId, TeamId, UserId


class Message(DomainModel):
    """Team chat message."""

    id: MessageId
    content: str = Field(min_length=1, max_length=1000)
    sender_id: UserId
    team_id: TeamId
    created_at: datetime = Field(default_factory=utc_now)
