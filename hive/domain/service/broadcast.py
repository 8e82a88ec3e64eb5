"""Real-time broadcast port."""

from abc import ABC, abstractmethod
from typing import Any

from hive.domain.value import RealtimeEvent, TeamId


class Broadcaster(ABC):
    """Pushes events to every connection in a team room.

    Delivery is fire-and-forget: implementations log failures and never
    raise them to the caller.
    """

    @abstractmethod
    async def broadcast(
        self, team_id: TeamId, event: RealtimeEvent, data: dict[str, Any]
    ) -> int:
        """Send an event to a team room.

        Args:
            team_id: Room to broadcast to
            event: Event name
            data: JSON-serializable payload

        Returns:
            Number of connections the event was delivered to
        """
        pass
