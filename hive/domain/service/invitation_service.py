"""Invitation domain service.

State machine: active -> used (first valid use) and active -> expired (clock).
Used and expired invitations are inert.
"""

import secrets
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from hive.config import InvitationSettings
from hive.domain.error import NotAuthorizedError, NotFoundError
from hive.domain.model import Invitation, Team, User
from hive.domain.repository import InvitationRepository
from hive.domain.value import (
    ActivityType,
    EntityType,
    InvitationCode,
    InvitationId,
    Role,
    TeamId,
)

from .access import can_grant
from .activity_service import ActivityService
from .base import Service
from .team_service import TeamService


def _mask(code: InvitationCode) -> str:
    return code.root[:8] + "..."


class InvitationService(Service):
    """Domain service for team invitations."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        team_service: TeamService,
        activity_service: ActivityService,
        invitation_settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            team_service: Team membership service
            activity_service: Activity audit service
            invitation_settings: Expiry and code length
        """
        self.invitation_repository = invitation_repository
        self.team_service = team_service
        self.activity_service = activity_service
        self.invitation_settings = invitation_settings

    def generate_code(self) -> InvitationCode:
        """Generate a random hex invitation code."""
        return InvitationCode(secrets.token_hex(self.invitation_settings.code_bytes))

    async def create_invitation(
        self,
        creator: User,
        email: str | None = None,
        role: Role = Role.MEMBER,
    ) -> Invitation:
        """Create an invitation to the creator's team.

        Args:
            creator: ADMIN or MANAGER issuing the invitation
            email: Optional address the invitation is restricted to
            role: Role granted on use

        Returns:
            Created invitation

        Raises:
            NotAuthorizedError: If the creator may not grant the role
        """
        with logfire.span(
            "invitation_service.create_invitation",
            creator_id=str(creator.id),
            role=role.value,
        ):
            if not can_grant(creator, role):
                logfire.warn(
                    "Invitation role above creator's role",
                    creator_id=str(creator.id),
                    role=role.value,
                )
                raise NotAuthorizedError(
                    f"{creator.role.value} cannot invite users as {role.value}"
                )
            team_id = self.team_of(creator)

            now = datetime.now(timezone.utc)
            invitation = Invitation(
                id=InvitationId(uuid4()),
                code=self.generate_code(),
                team_id=team_id,
                created_by=creator.id,
                email=email.strip().lower() if email else None,
                role=role,
                used=False,
                used_by=None,
                expires_at=now + timedelta(days=self.invitation_settings.expiry_days),
                created_at=now,
            )
            saved = await self.invitation_repository.save(invitation)

            await self.activity_service.record(
                type=ActivityType.INVITATION_CREATED,
                description=(
                    f"{creator.name} created an invitation"
                    + (f" for {saved.email}" if saved.email else "")
                ),
                actor_id=creator.id,
                team_id=saved.team_id,
                entity_id=saved.id,
                entity_type=EntityType.INVITATION,
                metadata={"role": role.value, "email": saved.email},
            )
            logfire.info(
                "Invitation created",
                invitation_id=str(saved.id),
                code=_mask(saved.code),
            )
            return saved

    async def list_invitations(self, team_id: TeamId) -> list[Invitation]:
        """List the team's unexpired invitations, newest first."""
        with logfire.span(
            "invitation_service.list_invitations", team_id=str(team_id)
        ):
            invitations = await self.invitation_repository.find_unexpired_by_team(
                team_id, datetime.now(timezone.utc)
            )
            logfire.info(
                "Invitations listed", team_id=str(team_id), count=len(invitations)
            )
            return invitations

    async def validate_invitation(self, code: InvitationCode) -> tuple[Invitation, Team]:
        """Look up an active invitation without changing it.

        Returns:
            Tuple of (invitation, team)

        Raises:
            NotFoundError: If the code is unknown, used or expired
        """
        with logfire.span(
            "invitation_service.validate_invitation", code=_mask(code)
        ):
            invitation = await self.invitation_repository.find_active_by_code(
                code, datetime.now(timezone.utc)
            )
            if not invitation:
                logfire.warn("Invitation not active", code=_mask(code))
                raise NotFoundError("Invitation", _mask(code))
            team = await self.team_service.get_by_id(invitation.team_id)
            return invitation, team

    async def use_invitation(self, user: User, code: InvitationCode) -> tuple[User, Team]:
        """Consume an invitation and move the user into its team.

        The used flag is flipped by a conditional write, so a code can be
        consumed at most once even under concurrent requests.

        Args:
            user: Authenticated user accepting the invitation
            code: Invitation code

        Returns:
            Tuple of (updated user, team joined)

        Raises:
            NotFoundError: If the invitation is not active
            NotAuthorizedError: If it is restricted to a different email
        """
        with logfire.span(
            "invitation_service.use_invitation",
            user_id=str(user.id),
            code=_mask(code),
        ):
            now = datetime.now(timezone.utc)
            invitation = await self.invitation_repository.find_active_by_code(code, now)
            if not invitation:
                logfire.warn("Invitation not active", code=_mask(code))
                raise NotFoundError("Invitation", _mask(code))

            if not invitation.is_for_email(user.email):
                logfire.warn(
                    "Invitation email mismatch",
                    invitation_id=str(invitation.id),
                    user_id=str(user.id),
                )
                raise NotAuthorizedError(
                    "This invitation was issued for a different email address"
                )

            consumed = await self.invitation_repository.mark_used(code, user.id, now)
            if not consumed:
                logfire.warn("Invitation already consumed", code=_mask(code))
                raise NotFoundError("Invitation", _mask(code))

            team = await self.team_service.get_by_id(consumed.team_id)
            updated = await self.team_service.join_team(user, team, consumed.role)
            logfire.info(
                "Invitation used",
                invitation_id=str(consumed.id),
                user_id=str(user.id),
                team_id=str(team.id),
            )
            return updated, team

    async def delete_invitation(
        self, invitation_id: InvitationId, team_id: TeamId
    ) -> None:
        """Delete an invitation of the team.

        Raises:
            NotFoundError: If the invitation is not in the team
        """
        with logfire.span(
            "invitation_service.delete_invitation",
            invitation_id=str(invitation_id),
            team_id=str(team_id),
        ):
            invitation = await self.invitation_repository.find_in_team(
                invitation_id, team_id
            )
            if not invitation:
                logfire.warn("Invitation not found", invitation_id=str(invitation_id))
                raise NotFoundError("Invitation", str(invitation_id))
            await self.invitation_repository.delete(invitation.id)
            logfire.info("Invitation deleted", invitation_id=str(invitation_id))
