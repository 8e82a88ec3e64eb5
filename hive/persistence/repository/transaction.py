"""PostgreSQL implementation of Transaction."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.repository import Transaction


class PostgresTransaction(Transaction):
    """Commits the request session.

    The session stays usable afterwards; later writes open a new transaction
    that the unit of work commits when the request ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        """Commit the request session."""
        await self.session.commit()
        logfire.debug("Request transaction committed")
