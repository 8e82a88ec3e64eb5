"""Get messages use case."""

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator

from hive.application.view import MessageView, message_views
from hive.domain.model import User
from hive.domain.service import MessageService, UserService
from hive.domain.service.access import ALL_ROLES, require_role


class GetMessagesRequest(BaseModel):
    """Get messages request."""

    caller: User
    limit: int | None = None
    before: datetime | None = None

    @field_validator("before")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        """Stored timestamps are UTC; a cursor without an offset is read as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class GetMessagesResponse(BaseModel):
    """Get messages response."""

    messages: list[MessageView]


class GetMessagesUseCase:
    """Use case for paging through the team chat history."""

    def __init__(
        self, message_service: MessageService, user_service: UserService
    ) -> None:
        self.message_service = message_service
        self.user_service = user_service

    async def execute(self, request: GetMessagesRequest) -> GetMessagesResponse:
        """Return the latest team messages, oldest first."""
        require_role(request.caller, ALL_ROLES)
        if request.caller.team_id is None:
            return GetMessagesResponse(messages=[])
        messages = await self.message_service.list_messages(
            request.caller.team_id, limit=request.limit, before=request.before
        )
        return GetMessagesResponse(
            messages=await message_views(messages, self.user_service)
        )
