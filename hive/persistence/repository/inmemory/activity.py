"""In-memory activity repository for testing."""

from typing import List

from hive.domain.model import Activity
from hive.domain.repository import ActivityRepository
from hive.domain.value import TeamId, UserId

from .store import InMemoryStore


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def append(self, activity: Activity) -> Activity:
        """Append an activity."""
        self._store.activities.append(activity)
        return activity

    async def find_by_team(self, team_id: TeamId, limit: int = 20) -> List[Activity]:
        """Find a team's latest activities."""
        matches = [a for a in self._store.activities if a.team_id == team_id]
        matches.sort(key=lambda a: a.created_at, reverse=True)
        return matches[:limit]

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Activity]:
        """Find a user's latest activities."""
        matches = [a for a in self._store.activities if a.actor_id == user_id]
        matches.sort(key=lambda a: a.created_at, reverse=True)
        return matches[:limit]
