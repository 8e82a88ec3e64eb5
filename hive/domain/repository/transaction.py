"""Transaction interface."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """The request's unit of work.

    Writes made through the request's repositories become durable when the
    request finishes. Use cases that announce a write to other clients commit
    first, so a client that refetches on the announcement sees the new state.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes so far durable and visible to other sessions."""
        pass
