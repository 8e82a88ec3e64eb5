"""Interface layer errors and domain error translation."""

from typing import Any

import logfire
from fastapi import HTTPException, status

from hive.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


class APIError(HTTPException):
    """HTTP error carrying field-level details for the response envelope."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.details = details or []


def unauthenticated(message: str = "unauthenticated") -> HTTPException:
    """Build the 401 returned for missing or invalid credentials."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def http_error(error: DomainError | ValueError, action: str) -> HTTPException:
    """Translate a domain error into an HTTP error.

    Args:
        error: Error raised by a use case
        action: What the route was doing, for the log line

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, ValidationError):
        logfire.warn(f"{action}: validation error", error=str(error))
        return APIError(
            status.HTTP_400_BAD_REQUEST, str(error), details=error.details
        )
    if isinstance(error, AuthenticationError):
        logfire.warn(f"{action}: unauthenticated", error=str(error))
        return unauthenticated()
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"{action}: forbidden", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action}: not found", error=str(error))
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{error.resource} not found"
        )
    if isinstance(error, (BusinessRuleViolationError, ConflictError, ValueError)):
        logfire.warn(f"{action}: rejected", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(f"{action}: unexpected domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error"
    )
