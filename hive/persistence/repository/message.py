"""PostgreSQL implementation of Message repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Message
from hive.domain.repository import MessageRepository
from hive.domain.value import TeamId
from hive.persistence.mappers import message_to_dict, row_to_message
from hive.persistence.tables import messages_table


class PostgresMessageRepository(MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, message: Message) -> Message:
        """Insert a message."""
        await self.session.execute(
            insert(messages_table).values(**message_to_dict(message))
        )
        await self.session.flush()
        return message

    async def find_by_team(
        self,
        team_id: TeamId,
        limit: int = 50,
        before: Optional[datetime] = None,
    ) -> List[Message]:
        """Select the newest messages, then return them oldest first."""
        stmt = select(messages_table).where(messages_table.c.team_id == team_id)
        if before is not None:
            stmt = stmt.where(messages_table.c.created_at < before)
        stmt = stmt.order_by(messages_table.c.created_at.desc()).limit(limit)

        result = await self.session.execute(stmt)
        messages = [row_to_message(dict(row)) for row in result.mappings().all()]
        messages.reverse()
        return messages
