"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Invitation
from hive.domain.repository import InvitationRepository
from hive.domain.value import InvitationCode, InvitationId, TeamId, UserId
from hive.persistence.mappers import invitation_to_dict, row_to_invitation
from hive.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_in_team(
        self, invitation_id: InvitationId, team_id: TeamId
    ) -> Optional[Invitation]:
        """Find an invitation of the given team."""
        stmt = select(invitations_table).where(
            invitations_table.c.id == invitation_id,
            invitations_table.c.team_id == team_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_active_by_code(
        self, code: InvitationCode, now: datetime
    ) -> Optional[Invitation]:
        """Find an unused, unexpired invitation by code."""
        stmt = select(invitations_table).where(
            invitations_table.c.code == code.root,
            invitations_table.c.used.is_(False),
            invitations_table.c.expires_at > now,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def mark_used(
        self, code: InvitationCode, user_id: UserId, now: datetime
    ) -> Optional[Invitation]:
        """Flip `used` with a single conditional UPDATE ... RETURNING."""
        stmt = (
            update(invitations_table)
            .where(
                invitations_table.c.code == code.root,
                invitations_table.c.used.is_(False),
                invitations_table.c.expires_at > now,
            )
            .values(used=True, used_by=user_id)
            .returning(*invitations_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_unexpired_by_team(
        self, team_id: TeamId, now: datetime
    ) -> List[Invitation]:
        """Find a team's unexpired invitations, newest first."""
        stmt = (
            select(invitations_table)
            .where(
                invitations_table.c.team_id == team_id,
                invitations_table.c.expires_at > now,
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        invitation_dict = invitation_to_dict(invitation)
        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return invitation

    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation."""
        await self.session.execute(
            delete(invitations_table).where(invitations_table.c.id == invitation_id)
        )
