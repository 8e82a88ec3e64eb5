"""Response envelope shared by every endpoint."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Successful response body: `{"success": true, "data": ...}`."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class ErrorEnvelope(BaseModel):
    """Failed response body."""

    success: bool = False
    error: str
    details: list[dict[str, Any]] | None = None
    message: str | None = None
