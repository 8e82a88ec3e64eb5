"""In-memory message repository for testing."""

from datetime import datetime
from typing import List, Optional

from hive.domain.model import Message
from hive.domain.repository import MessageRepository
from hive.domain.value import TeamId

from .store import InMemoryStore


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, message: Message) -> Message:
        """Append a message."""
        self._store.messages.append(message)
        return message

    async def find_by_team(
        self,
        team_id: TeamId,
        limit: int = 50,
        before: Optional[datetime] = None,
    ) -> List[Message]:
        """Select the newest messages, then return them oldest first."""
        matches = [
            m
            for m in self._store.messages
            if m.team_id == team_id and (before is None or m.created_at < before)
        ]
        matches.sort(key=lambda m: m.created_at)
        return matches[-limit:] if limit > 0 else []
