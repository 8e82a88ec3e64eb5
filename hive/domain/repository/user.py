"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hive.domain.model.user import User
from hive.domain.value import Role, TeamId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by their identity provider subject.

        Args:
            external_id: Subject claim of the identity token

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive).

        Args:
            email: Email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_team(self, team_id: TeamId) -> List[User]:
        """Find all users of a team.

        Returns:
            Users ordered by role (ADMIN, MANAGER, MEMBER) then name
        """
        pass

    @abstractmethod
    async def find_in_team(self, user_id: UserId, team_id: TeamId) -> Optional[User]:
        """Find a user only if they belong to the given team."""
        pass

    @abstractmethod
    async def find_without_team(self) -> List[User]:
        """Find all users that are not assigned to any team."""
        pass

    @abstractmethod
    async def find_many(self, user_ids: List[UserId]) -> List[User]:
        """Find users by a list of IDs.

        Unknown IDs are skipped; order is not guaranteed.
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass

    @abstractmethod
    async def count_by_role(self, team_id: TeamId, role: Role) -> int:
        """Count users of a team holding the given role.

        Args:
            team_id: Team to count in
            role: Role to count

        Returns:
            Number of matching users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If email or external id is already taken
        """
        pass
