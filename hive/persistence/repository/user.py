"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import case, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.error import ConflictError
from hive.domain.model import User
from hive.domain.repository import UserRepository
from hive.domain.value import Role, TeamId, UserId
from hive.persistence.mappers import row_to_user, user_to_dict
from hive.persistence.tables import users_table

_ROLE_ORDER = case(
    {role.value: role.rank for role in Role},
    value=users_table.c.role,
    else_=len(Role),
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by identity provider subject."""
        stmt = select(users_table).where(users_table.c.external_id == external_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (emails are stored lowercased)."""
        stmt = select(users_table).where(
            users_table.c.email == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_team(self, team_id: TeamId) -> List[User]:
        """Find team users ordered by role then name."""
        stmt = (
            select(users_table)
            .where(users_table.c.team_id == team_id)
            .order_by(_ROLE_ORDER, users_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_in_team(self, user_id: UserId, team_id: TeamId) -> Optional[User]:
        """Find a user only if they belong to the team."""
        stmt = select(users_table).where(
            users_table.c.id == user_id, users_table.c.team_id == team_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_without_team(self) -> List[User]:
        """Find users with no team, oldest first."""
        stmt = (
            select(users_table)
            .where(users_table.c.team_id.is_(None))
            .order_by(users_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_many(self, user_ids: List[UserId]) -> List[User]:
        """Find users by IDs."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count(self) -> int:
        """Count all users."""
        stmt = select(func.count()).select_from(users_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_role(self, team_id: TeamId, role: Role) -> int:
        """Count team users holding a role."""
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.team_id == team_id, users_table.c.role == role.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        The write runs in a savepoint so a unique violation leaves the
        request transaction usable.

        Raises:
            ConflictError: If the email or external id is already taken
        """
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)

        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError("A user with this email or identity already exists") from e

        await self.session.flush()
        return user
