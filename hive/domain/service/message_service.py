"""Team chat domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from hive.config import MessageSettings
from hive.domain.error import ValidationError
from hive.domain.model import Message, User
from hive.domain.repository import MessageRepository
from hive.domain.value import ActivityType, EntityType, MessageId, TeamId

from .activity_service import ActivityService
from .base import Service


class MessageService(Service):
    """Domain service for team chat messages."""

    def __init__(
        self,
        message_repository: MessageRepository,
        activity_service: ActivityService,
        message_settings: MessageSettings,
    ) -> None:
        """Initialize message service.

        Args:
            message_repository: Message repository
            activity_service: Activity audit service
            message_settings: Chat limits
        """
        self.message_repository = message_repository
        self.activity_service = activity_service
        self.message_settings = message_settings

    async def list_messages(
        self,
        team_id: TeamId,
        limit: int | None = None,
        before: datetime | None = None,
    ) -> list[Message]:
        """List the latest team messages in chronological order.

        Args:
            team_id: Team ID
            limit: Page size (clamped to the configured maximum)
            before: Only return messages created before this instant

        Returns:
            Messages, oldest first
        """
        page_size = min(
            limit or self.message_settings.default_page_size,
            self.message_settings.max_page_size,
        )
        with logfire.span(
            "message_service.list_messages", team_id=str(team_id), limit=page_size
        ):
            messages = await self.message_repository.find_by_team(
                team_id, limit=page_size, before=before
            )
            logfire.info("Messages listed", team_id=str(team_id), count=len(messages))
            return messages

    async def send_message(self, sender: User, content: str) -> Message:
        """Post a message to the sender's team.

        Content is trimmed; empty content is rejected before anything is
        written.

        Args:
            sender: Authenticated user
            content: Raw message text

        Returns:
            Stored message

        Raises:
            ValidationError: If the trimmed content is empty or too long
        """
        with logfire.span("message_service.send_message", sender_id=str(sender.id)):
            text = content.strip()
            if not text:
                logfire.warn("Empty message rejected", sender_id=str(sender.id))
                raise ValidationError(
                    "Message content is required",
                    details=[
                        {
                            "field": "content",
                            "message": "Message content cannot be empty",
                            "value": content,
                        }
                    ],
                )
            if len(text) > self.message_settings.max_length:
                raise ValidationError(
                    "Message content is too long",
                    details=[
                        {
                            "field": "content",
                            "message": (
                                "Message content must be at most "
                                f"{self.message_settings.max_length} characters"
                            ),
                        }
                    ],
                )
            team_id = self.team_of(sender)

            message = Message(
                id=MessageId(uuid4()),
                content=text,
                sender_id=sender.id,
                team_id=team_id,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.message_repository.save(message)

            await self.activity_service.record(
                type=ActivityType.MESSAGE_SENT,
                description=f"{sender.name} sent a message",
                actor_id=sender.id,
                team_id=saved.team_id,
                entity_id=saved.id,
                entity_type=EntityType.MESSAGE,
            )
            logfire.info("Message sent", message_id=str(saved.id))
            return saved
