"""In-memory transaction for testing."""

from hive.domain.repository import Transaction


class InMemoryTransaction(Transaction):
    """In-memory writes are visible immediately; committing only counts."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
