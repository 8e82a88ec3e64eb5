"""Message repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from hive.domain.model.message import Message
from hive.domain.value import TeamId


class MessageRepository(ABC):
    """Repository for team chat messages. Append-only."""

    @abstractmethod
    async def save(self, message: Message) -> Message:
        """Persist a new message."""
        pass

    @abstractmethod
    async def find_by_team(
        self,
        team_id: TeamId,
        limit: int = 50,
        before: Optional[datetime] = None,
    ) -> List[Message]:
        """Find the latest messages of a team.

        Selects the newest `limit` messages created strictly before `before`
        (when given) and returns them in chronological order.

        Args:
            team_id: Team ID
            limit: Maximum number of messages
            before: Optional exclusive upper bound on created_at

        Returns:
            Messages, oldest first
        """
        pass
