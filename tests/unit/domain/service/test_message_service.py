"""Unit tests for MessageService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from hive.domain.error import ValidationError
from hive.domain.model import Message
from hive.domain.repository import ActivityRepository, MessageRepository
from hive.domain.service import MessageService
from hive.domain.value import ActivityType, MessageId
from tests.harness import create_env_fixture, make_staffed_team

# Unit test fixture
unit_env = create_env_fixture()


class TestSendMessage:
    """Tests for send_message."""

    @pytest.mark.asyncio
    async def test_send_message_trims_content(self, unit_env):
        """Content is stored trimmed in the sender's team."""
        message_service = await unit_env.get(MessageService)
        activity_repo = await unit_env.get(ActivityRepository)
        staff = await make_staffed_team(unit_env)

        message = await message_service.send_message(staff.member, "  hello team \n")

        assert message.content == "hello team"
        assert message.team_id == staff.team.id
        assert message.sender_id == staff.member.id

        activities = await activity_repo.find_by_team(staff.team.id)
        assert [a.type for a in activities] == [ActivityType.MESSAGE_SENT]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t "])
    async def test_whitespace_only_content_is_rejected(self, unit_env, content):
        """Blank content raises ValidationError and writes nothing."""
        # Arrange
        message_service = await unit_env.get(MessageService)
        message_repo = await unit_env.get(MessageRepository)
        activity_repo = await unit_env.get(ActivityRepository)
        staff = await make_staffed_team(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await message_service.send_message(staff.member, content)

        assert exc_info.value.details[0]["field"] == "content"
        assert await message_repo.find_by_team(staff.team.id, limit=50) == []
        assert await activity_repo.find_by_team(staff.team.id) == []

    @pytest.mark.asyncio
    async def test_overlong_content_is_rejected(self, unit_env):
        """Content over 1000 characters after trimming is rejected."""
        message_service = await unit_env.get(MessageService)
        staff = await make_staffed_team(unit_env)

        with pytest.raises(ValidationError, match="too long"):
            await message_service.send_message(staff.member, "x" * 1001)


class TestListMessages:
    """Tests for list_messages."""

    async def _seed(self, unit_env, team_id, sender_id, count):
        message_repo = await unit_env.get(MessageRepository)
        start = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
        messages = []
        for i in range(count):
            messages.append(
                await message_repo.save(
                    Message(
                        id=MessageId(uuid4()),
                        content=f"message {i}",
                        sender_id=sender_id,
                        team_id=team_id,
                        created_at=start + timedelta(minutes=i),
                    )
                )
            )
        return messages

    @pytest.mark.asyncio
    async def test_returns_latest_page_oldest_first(self, unit_env):
        """The newest `limit` messages are returned in chronological order."""
        message_service = await unit_env.get(MessageService)
        staff = await make_staffed_team(unit_env)
        await self._seed(unit_env, staff.team.id, staff.admin.id, 5)

        messages = await message_service.list_messages(staff.team.id, limit=3)

        assert [m.content for m in messages] == ["message 2", "message 3", "message 4"]

    @pytest.mark.asyncio
    async def test_before_pages_backwards(self, unit_env):
        """`before` excludes messages at or after the cursor."""
        message_service = await unit_env.get(MessageService)
        staff = await make_staffed_team(unit_env)
        seeded = await self._seed(unit_env, staff.team.id, staff.admin.id, 5)

        messages = await message_service.list_messages(
            staff.team.id, limit=2, before=seeded[2].created_at
        )

        assert [m.content for m in messages] == ["message 0", "message 1"]

    @pytest.mark.asyncio
    async def test_other_team_messages_are_not_listed(self, unit_env):
        """Messages are scoped to the requested team."""
        message_service = await unit_env.get(MessageService)
        staff = await make_staffed_team(unit_env)
        other = await make_staffed_team(unit_env, prefix="x")
        await self._seed(unit_env, other.team.id, other.admin.id, 2)

        assert await message_service.list_messages(staff.team.id) == []
