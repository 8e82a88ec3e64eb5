"""Send message use case."""

from pydantic import BaseModel

from hive.application.view import MessageView
from hive.domain.model import User
from hive.domain.repository import Transaction
from hive.domain.service import Broadcaster, MessageService
from hive.domain.service.access import ALL_ROLES, require_role
from hive.domain.value import RealtimeEvent


class SendMessageRequest(BaseModel):
    """Send message request."""

    caller: User
    content: str


class SendMessageUseCase:
    """Use case for posting a chat message and pushing it to the team room."""

    def __init__(
        self,
        message_service: MessageService,
        transaction: Transaction,
        broadcaster: Broadcaster,
    ) -> None:
        """Initialize send message use case.

        Args:
            message_service: Message domain service
            transaction: Request transaction, committed before the push
            broadcaster: Team room broadcaster
        """
        self.message_service = message_service
        self.transaction = transaction
        self.broadcaster = broadcaster

    async def execute(self, request: SendMessageRequest) -> MessageView:
        """Execute send message flow.

        Steps:
        1. Validate and store the message (records `message_sent`)
        2. Commit, then push `message-received` to the team room

        Raises:
            ValidationError: If the trimmed content is empty or too long
        """
        require_role(request.caller, ALL_ROLES)
        message = await self.message_service.send_message(
            request.caller, request.content
        )
        view = MessageView.of(message, request.caller)
        await self.transaction.commit()
        await self.broadcaster.broadcast(
            message.team_id,
            RealtimeEvent.MESSAGE_RECEIVED,
            view.model_dump(mode="json", by_alias=True),
        )
        return view
