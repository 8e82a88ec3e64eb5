"""In-memory user repository for testing."""

from typing import List, Optional

from hive.domain.error import ConflictError
from hive.domain.model import User
from hive.domain.repository import UserRepository
from hive.domain.value import Role, TeamId, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by identity provider subject."""
        for user in self._store.users.values():
            if user.external_id == external_id:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        needle = email.strip().lower()
        for user in self._store.users.values():
            if user.email.lower() == needle:
                return user
        return None

    async def find_by_team(self, team_id: TeamId) -> List[User]:
        """Find team users ordered by role then name."""
        users = [u for u in self._store.users.values() if u.team_id == team_id]
        users.sort(key=lambda u: (u.role.rank, u.name))
        return users

    async def find_in_team(self, user_id: UserId, team_id: TeamId) -> Optional[User]:
        """Find a user only if they belong to the team."""
        user = self._store.users.get(user_id)
        if user and user.team_id == team_id:
            return user
        return None

    async def find_without_team(self) -> List[User]:
        """Find users with no team, oldest first."""
        users = [u for u in self._store.users.values() if u.team_id is None]
        users.sort(key=lambda u: u.created_at)
        return users

    async def find_many(self, user_ids: List[UserId]) -> List[User]:
        """Find users by IDs."""
        return [self._store.users[uid] for uid in user_ids if uid in self._store.users]

    async def count(self) -> int:
        """Count all users."""
        return len(self._store.users)

    async def count_by_role(self, team_id: TeamId, role: Role) -> int:
        """Count team users holding a role."""
        return sum(
            1
            for u in self._store.users.values()
            if u.team_id == team_id and u.role == role
        )

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            ConflictError: If another user has the same email or external id
        """
        for other in self._store.users.values():
            if other.id == user.id:
                continue
            if (
                other.email.lower() == user.email.lower()
                or other.external_id == user.external_id
            ):
                raise ConflictError(
                    "A user with this email or identity already exists"
                )
        self._store.users[user.id] = user
        return user
