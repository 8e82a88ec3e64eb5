"""User domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from hive.domain.error import BusinessRuleViolationError, NotFoundError
from hive.domain.model import User
from hive.domain.repository import UserRepository
from hive.domain.value import IdentityClaims, Role, TeamId, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_external_id(self, external_id: str) -> User | None:
        """Get user by identity provider subject.

        Args:
            external_id: Subject claim

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_by_external_id", external_id=external_id
        ):
            return await self.user_repository.find_by_external_id(external_id)

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_email", email=email):
            return await self.user_repository.find_by_email(email)

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Get users by ID, keyed by ID. Unknown IDs are skipped."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_many(list(set(user_ids)))
        return {user.id: user for user in users}

    async def get_in_team(self, user_id: UserId, team_id: TeamId) -> User | None:
        """Get a user only if they belong to the team."""
        return await self.user_repository.find_in_team(user_id, team_id)

    async def count_users(self) -> int:
        """Count all registered users."""
        return await self.user_repository.count()

    async def create_user(
        self,
        claims: IdentityClaims,
        role: Role = Role.MEMBER,
        email: str | None = None,
        name: str | None = None,
    ) -> User:
        """Create a user for a verified identity.

        Args:
            claims: Verified identity claims
            role: Initial role
            email: Email override (defaults to the token email)
            name: Display name override (defaults to token name or email local part)

        Returns:
            Created user, not yet assigned to a team

        Raises:
            ConflictError: If the email or subject is already registered
        """
        with logfire.span(
            "user_service.create_user", subject=claims.subject, role=role.value
        ):
            user = User(
                id=UserId(uuid4()),
                external_id=claims.subject,
                email=(email or claims.email).strip().lower(),
                name=(name or claims.display_name).strip(),
                role=role,
                team_id=None,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User created",
                user_id=str(saved.id),
                email=saved.email,
                role=saved.role.value,
            )
            return saved

    async def update_user(self, user: User) -> User:
        """Persist changes to a user."""
        return await self.user_repository.save(user)

    async def list_team(self, team_id: TeamId) -> list[User]:
        """List team members ordered by role, then name."""
        with logfire.span("user_service.list_team", team_id=str(team_id)):
            users = await self.user_repository.find_by_team(team_id)
            logfire.info("Team users listed", team_id=str(team_id), count=len(users))
            return users

    async def list_unassigned(self) -> list[User]:
        """List users that do not belong to any team."""
        return await self.user_repository.find_without_team()

    async def change_role(self, actor: User, target_id: UserId, role: Role) -> User:
        """Change the role of a user in the actor's team.

        Args:
            actor: User performing the change
            target_id: User whose role changes
            role: New role

        Returns:
            Updated user

        Raises:
            NotFoundError: If the target is not in the actor's team
            BusinessRuleViolationError: If the only admin would demote themselves
        """
        with logfire.span(
            "user_service.change_role",
            actor_id=str(actor.id),
            target_id=str(target_id),
            role=role.value,
        ):
            if actor.team_id is None:
                raise NotFoundError("User", str(target_id))

            target = await self.user_repository.find_in_team(target_id, actor.team_id)
            if not target:
                logfire.warn("Role change target not in team", target_id=str(target_id))
                raise NotFoundError("User", str(target_id))

            if (
                target.id == actor.id
                and target.role == Role.ADMIN
                and role != Role.ADMIN
            ):
                admins = await self.user_repository.count_by_role(
                    actor.team_id, Role.ADMIN
                )
                if admins <= 1:
                    logfire.warn("Only admin demotion blocked", user_id=str(actor.id))
                    raise BusinessRuleViolationError(
                        "Cannot change role: you are the only admin of the team"
                    )

            updated = await self.user_repository.save(
                target.model_copy(update={"role": role})
            )
            logfire.info(
                "User role changed",
                target_id=str(target_id),
                old_role=target.role.value,
                new_role=role.value,
            )
            return updated
