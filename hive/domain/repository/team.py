"""Team repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hive.domain.model.team import Team
from hive.domain.value import TeamId, UserId


class TeamRepository(ABC):
    """Repository for Team aggregate.

    Membership is stored as an ordered set: adding an existing member is a
    no-op, so concurrent joins never produce duplicates.
    """

    @abstractmethod
    async def find_by_id(self, team_id: TeamId) -> Optional[Team]:
        """Find a team by ID, with its member list populated.

        Args:
            team_id: The team's unique identifier

        Returns:
            The team if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_default(self) -> Optional[Team]:
        """Find the team flagged as default.

        Returns:
            The default team if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def create_default(self, team: Team) -> Team:
        """Create the default team, or return the one that already exists.

        When two callers race, the loser re-reads and returns the winner's
        team instead of creating a second default team.

        Args:
            team: Team to create (must have is_default=True)

        Returns:
            The default team that is now persisted
        """
        pass

    @abstractmethod
    async def add_member(self, team_id: TeamId, user_id: UserId) -> bool:
        """Add a user to the member list (idempotent).

        Args:
            team_id: Team to join
            user_id: Member to add

        Returns:
            True if the user was added, False if already a member
        """
        pass

    @abstractmethod
    async def remove_member(self, team_id: TeamId, user_id: UserId) -> None:
        """Remove a user from the member list. Missing members are ignored."""
        pass

    @abstractmethod
    async def save(self, team: Team) -> Team:
        """Save a team's own fields (create or update).

        Membership is managed with add_member/remove_member; the member list
        on the passed team is persisted only on creation.
        """
        pass
