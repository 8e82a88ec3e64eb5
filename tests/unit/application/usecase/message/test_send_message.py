"""Unit tests for SendMessageUseCase."""

import pytest

from hive.adapter.realtime import RoomRegistry
from hive.application.usecase.message import SendMessageRequest, SendMessageUseCase
from hive.domain.error import ValidationError
from hive.domain.service import MessageService
from tests.harness import (
    EventJournal,
    RecordingConnection,
    create_env_fixture,
    make_staffed_team,
)

# Unit test fixture
unit_env = create_env_fixture()


class TestSendMessage:
    """Tests for posting a chat message."""

    @pytest.mark.asyncio
    async def test_message_is_pushed_to_team_room(self, unit_env):
        """The stored message, with its sender, is broadcast to the team."""
        # Arrange
        use_case = await unit_env.get(SendMessageUseCase)
        rooms = await unit_env.get(RoomRegistry)
        staff = await make_staffed_team(unit_env)
        connection = RecordingConnection()
        rooms.join(connection, staff.team.id)

        # Act
        view = await use_case.execute(
            SendMessageRequest(caller=staff.member, content="  Standup in 5  ")
        )

        # Assert
        assert view.content == "Standup in 5"
        assert view.sender.name == staff.member.name
        assert connection.sent == [
            {
                "event": "message-received",
                "data": view.model_dump(mode="json", by_alias=True),
            }
        ]

    @pytest.mark.asyncio
    async def test_blank_message_is_not_broadcast(self, unit_env):
        """Whitespace-only content fails before anything is pushed."""
        use_case = await unit_env.get(SendMessageUseCase)
        rooms = await unit_env.get(RoomRegistry)
        staff = await make_staffed_team(unit_env)
        connection = RecordingConnection()
        rooms.join(connection, staff.team.id)

        with pytest.raises(ValidationError):
            await use_case.execute(SendMessageRequest(caller=staff.member, content="   "))

        assert connection.sent == []

    @pytest.mark.asyncio
    async def test_failed_delivery_does_not_fail_the_send(self, unit_env):
        """A dead connection is pruned and the message is still stored."""
        use_case = await unit_env.get(SendMessageUseCase)
        rooms = await unit_env.get(RoomRegistry)
        staff = await make_staffed_team(unit_env)
        dead, alive = RecordingConnection(fail=True), RecordingConnection()
        rooms.join(dead, staff.team.id)
        rooms.join(alive, staff.team.id)

        view = await use_case.execute(
            SendMessageRequest(caller=staff.admin, content="Hello")
        )

        assert view.content == "Hello"
        assert len(alive.sent) == 1
        assert rooms.room_of(dead) is None
        assert rooms.room_of(alive) == staff.team.id

    @pytest.mark.asyncio
    async def test_message_is_committed_before_broadcast(self, unit_env):
        journal = EventJournal()
        use_case = SendMessageUseCase(
            message_service=await unit_env.get(MessageService),
            transaction=journal,
            broadcaster=journal,
        )
        staff = await make_staffed_team(unit_env)

        await use_case.execute(SendMessageRequest(caller=staff.member, content="Hi"))

        assert journal.entries == ["commit", "message-received"]
