"""Activity repository interface."""

from abc import ABC, abstractmethod
from typing import List

from hive.domain.model.activity import Activity
from hive.domain.value import TeamId, UserId


class ActivityRepository(ABC):
    """Repository for the append-only activity log."""

    @abstractmethod
    async def append(self, activity: Activity) -> Activity:
        """Append an activity record.

        Implementations must isolate the write so that a failure here leaves
        the surrounding transaction usable.

        Args:
            activity: Activity to store

        Returns:
            The stored activity
        """
        pass

    @abstractmethod
    async def find_by_team(self, team_id: TeamId, limit: int = 20) -> List[Activity]:
        """Find a team's latest activities, newest first."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Activity]:
        """Find a user's latest activities as actor, newest first."""
        pass
