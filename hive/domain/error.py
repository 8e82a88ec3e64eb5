"""Domain layer errors."""

from typing import Any


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries optional field-level details in the same shape the API uses for
    request validation failures.
    """

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        self.details = details or []
        super().__init__(message)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when a bearer credential is missing or cannot be verified."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a role or field-level gate rejects an operation."""

    pass


class ConflictError(DomainError):
    """Raised when a write collides with a unique field."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    Also used for resources that exist but belong to another team.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
