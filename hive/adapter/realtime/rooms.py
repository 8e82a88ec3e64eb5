"""In-process team rooms for WebSocket fan-out.

One room per team. The registry is only touched from the event loop, so no
locking is needed; broadcasts iterate over a snapshot of the room so that
joins and leaves during a send are safe.
"""

import asyncio
from typing import Any

import logfire
from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder

from hive.domain.service.broadcast import Broadcaster
from hive.domain.value import RealtimeEvent, TeamId


class RoomRegistry(Broadcaster):
    """Maps team rooms to their open connections.

    A connection is in at most one room; joining a new room leaves the
    previous one.
    """

    def __init__(self, send_timeout: float = 5.0) -> None:
        """Create an empty registry.

        Args:
            send_timeout: Seconds a single send may take before the
                connection is dropped from its room
        """
        self.send_timeout = send_timeout
        self._rooms: dict[TeamId, set[WebSocket]] = {}
        self._membership: dict[WebSocket, TeamId] = {}

    def join(self, connection: WebSocket, team_id: TeamId) -> None:
        """Add a connection to a team room, leaving any previous room."""
        self.leave(connection)
        self._rooms.setdefault(team_id, set()).add(connection)
        self._membership[connection] = team_id
        logfire.info(
            "Connection joined room",
            team_id=str(team_id),
            room_size=len(self._rooms[team_id]),
        )

    def leave(self, connection: WebSocket) -> TeamId | None:
        """Remove a connection from its room.

        Returns:
            The team room the connection left, or None if it was in none
        """
        team_id = self._membership.pop(connection, None)
        if team_id is None:
            return None

        room = self._rooms.get(team_id)
        if room is not None:
            room.discard(connection)
            if not room:
                del self._rooms[team_id]
        return team_id

    def disconnect(self, connection: WebSocket) -> None:
        """Forget a closed connection."""
        team_id = self.leave(connection)
        if team_id is not None:
            logfire.info("Connection left room on disconnect", team_id=str(team_id))

    def room_of(self, connection: WebSocket) -> TeamId | None:
        """Team room the connection is in, if any."""
        return self._membership.get(connection)

    @property
    def room_count(self) -> int:
        """Number of rooms with at least one connection."""
        return len(self._rooms)

    def members(self, team_id: TeamId) -> set[WebSocket]:
        """Snapshot of the connections in a room."""
        return set(self._rooms.get(team_id, ()))

    async def broadcast(
        self, team_id: TeamId, event: RealtimeEvent, data: dict[str, Any]
    ) -> int:
        """Send `{"event", "data"}` to every connection in the team room.

        Sends run concurrently and each is bounded by `send_timeout`, so a
        client that stops reading delays the caller by at most that long and
        never holds up its peers. Failed or timed-out sends are logged and the
        connection is pruned; nothing is raised to the caller.

        Returns:
            Number of connections the event was delivered to
        """
        connections = self.members(team_id)
        if not connections:
            return 0

        payload = {"event": event.value, "data": jsonable_encoder(data)}
        with logfire.span(
            "rooms.broadcast",
            team_id=str(team_id),
            event_name=event.value,
            recipients=len(connections),
        ):
            results = await asyncio.gather(
                *(
                    self._send(connection, team_id, event, payload)
                    for connection in connections
                )
            )
            delivered = sum(results)
            logfire.info(
                "Event broadcast",
                team_id=str(team_id),
                event_name=event.value,
                delivered=delivered,
            )
        return delivered

    async def _send(
        self,
        connection: WebSocket,
        team_id: TeamId,
        event: RealtimeEvent,
        payload: dict[str, Any],
    ) -> bool:
        try:
            await asyncio.wait_for(connection.send_json(payload), self.send_timeout)
        except Exception as e:
            logfire.warn(
                "Broadcast delivery failed",
                team_id=str(team_id),
                event_name=event.value,
                error=str(e) or type(e).__name__,
            )
            self.disconnect(connection)
            return False
        return True
