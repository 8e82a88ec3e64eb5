"""Team chat routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import Field

from hive.application.usecase.auth import GetCurrentUserUseCase
from hive.application.usecase.base import WireModel
from hive.application.usecase.message import (
    GetMessagesRequest,
    GetMessagesUseCase,
    SendMessageRequest,
    SendMessageUseCase,
)
from hive.application.view import MessageView
from hive.domain.error import DomainError
from hive.interface.api.caller import authenticate
from hive.interface.api.envelope import Envelope
from hive.interface.error import http_error

router = APIRouter(prefix="/messages", tags=["messages"], route_class=DishkaRoute)


class SendMessageAPIRequest(WireModel):
    """API request for posting a chat message."""

    content: str = Field(min_length=1, max_length=1000)


@router.get("", response_model=Envelope[list[MessageView]])
async def get_messages(
    get_messages_use_case: FromDishka[GetMessagesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    before: datetime | None = Query(default=None),
) -> Envelope[list[MessageView]]:
    """Page backwards through the team chat.

    Args:
        get_messages_use_case: Get messages use case from DI
        get_current_user_use_case: Caller resolution from DI
        authorization: Bearer ID token
        limit: Page size (1-100)
        before: Only messages sent before this instant

    Returns:
        Envelope with the page in chronological order
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        result = await get_messages_use_case.execute(
            GetMessagesRequest(caller=caller, limit=limit, before=before)
        )
    except DomainError as e:
        raise http_error(e, "Get messages") from e
    return Envelope(data=result.messages)


@router.post(
    "", response_model=Envelope[MessageView], status_code=status.HTTP_201_CREATED
)
async def send_message(
    request: SendMessageAPIRequest,
    send_message_use_case: FromDishka[SendMessageUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> Envelope[MessageView]:
    """Post a message to the team chat and push it to the team room.

    Raises:
        HTTPException: 400 if the content is blank after trimming
    """
    caller = await authenticate(authorization, get_current_user_use_case)
    try:
        message = await send_message_use_case.execute(
            SendMessageRequest(caller=caller, content=request.content)
        )
    except DomainError as e:
        raise http_error(e, "Send message") from e
    return Envelope(data=message)
