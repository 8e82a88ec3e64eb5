"""Unit tests for the team room registry."""

import asyncio
from uuid import uuid4

import pytest

from hive.adapter.realtime import RoomRegistry
from hive.domain.value import RealtimeEvent, TeamId
from tests.harness import RecordingConnection, StalledConnection


@pytest.fixture
def rooms():
    return RoomRegistry()


class TestMembership:
    """Joining and leaving rooms."""

    def test_connection_is_in_at_most_one_room(self, rooms):
        """Joining a second room leaves the first."""
        connection = RecordingConnection()
        first, second = TeamId(uuid4()), TeamId(uuid4())

        rooms.join(connection, first)
        rooms.join(connection, second)

        assert rooms.room_of(connection) == second
        assert rooms.members(first) == set()
        assert rooms.members(second) == {connection}
        assert rooms.room_count == 1

    def test_leave_returns_left_room(self, rooms):
        connection = RecordingConnection()
        team_id = TeamId(uuid4())
        rooms.join(connection, team_id)

        assert rooms.leave(connection) == team_id
        assert rooms.leave(connection) is None
        assert rooms.room_count == 0

    def test_disconnect_without_room_is_noop(self, rooms):
        rooms.disconnect(RecordingConnection())

        assert rooms.room_count == 0


class TestBroadcast:
    """Fan-out to team rooms."""

    @pytest.mark.asyncio
    async def test_broadcast_reaches_only_the_team_room(self, rooms):
        """Every connection in the room gets the event; others get nothing."""
        team_id, other_team = TeamId(uuid4()), TeamId(uuid4())
        a, b, outsider = RecordingConnection(), RecordingConnection(), RecordingConnection()
        rooms.join(a, team_id)
        rooms.join(b, team_id)
        rooms.join(outsider, other_team)

        delivered = await rooms.broadcast(
            team_id, RealtimeEvent.MESSAGE_RECEIVED, {"content": "hi"}
        )

        expected = {"event": "message-received", "data": {"content": "hi"}}
        assert delivered == 2
        assert a.sent == [expected]
        assert b.sent == [expected]
        assert outsider.sent == []

    @pytest.mark.asyncio
    async def test_empty_room_delivers_nothing(self, rooms):
        delivered = await rooms.broadcast(
            TeamId(uuid4()), RealtimeEvent.TASK_UPDATE_RECEIVED, {}
        )

        assert delivered == 0

    @pytest.mark.asyncio
    async def test_failed_connection_is_pruned(self, rooms):
        """Send failures are swallowed and the dead connection removed."""
        team_id = TeamId(uuid4())
        dead, alive = RecordingConnection(fail=True), RecordingConnection()
        rooms.join(dead, team_id)
        rooms.join(alive, team_id)

        delivered = await rooms.broadcast(
            team_id, RealtimeEvent.PROJECT_UPDATE_RECEIVED, {"id": "p1"}
        )

        assert delivered == 1
        assert rooms.members(team_id) == {alive}
        assert rooms.room_of(dead) is None

    @pytest.mark.asyncio
    async def test_stalled_connection_does_not_block_peers(self):
        """A client that stops reading is dropped after the send timeout.

        Its peers still get the event and the broadcast returns promptly.
        """
        rooms = RoomRegistry(send_timeout=0.05)
        team_id = TeamId(uuid4())
        stalled = StalledConnection()
        healthy = [RecordingConnection() for _ in range(3)]
        rooms.join(stalled, team_id)
        for connection in healthy:
            rooms.join(connection, team_id)

        delivered = await asyncio.wait_for(
            rooms.broadcast(team_id, RealtimeEvent.MESSAGE_RECEIVED, {"content": "hi"}),
            timeout=1,
        )

        assert delivered == 3
        assert all(len(connection.sent) == 1 for connection in healthy)
        assert stalled.cancelled
        assert rooms.room_of(stalled) is None
        assert rooms.members(team_id) == set(healthy)

    @pytest.mark.asyncio
    async def test_payload_is_json_encoded(self, rooms):
        """UUIDs and other values are encoded before sending."""
        team_id = TeamId(uuid4())
        connection = RecordingConnection()
        rooms.join(connection, team_id)

        await rooms.broadcast(
            team_id, RealtimeEvent.TASK_UPDATE_RECEIVED, {"teamId": team_id}
        )

        assert connection.sent[0]["data"] == {"teamId": str(team_id)}
