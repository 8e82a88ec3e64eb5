"""Message use cases."""

from .get_messages import GetMessagesRequest, GetMessagesResponse, GetMessagesUseCase
from .send_message import SendMessageRequest, SendMessageUseCase

__all__ = [
    "GetMessagesRequest",
    "GetMessagesResponse",
    "GetMessagesUseCase",
    "SendMessageRequest",
    "SendMessageUseCase",
]
