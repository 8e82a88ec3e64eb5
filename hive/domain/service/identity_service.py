"""Identity verification domain service."""

from abc import ABC, abstractmethod

import logfire

from hive.domain.error import AuthenticationError
from hive.domain.value import IdentityClaims

from .base import Service


class IdentityVerifier(ABC):
    """Verifies bearer ID tokens issued by the external identity provider.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def verify(self, token: str) -> IdentityClaims:
        """Verify a token and return its claims.

        Args:
            token: Raw bearer token

        Returns:
            Verified identity claims

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        pass


class IdentityService(Service):
    """Domain service for resolving bearer credentials to identity claims."""

    def __init__(self, verifier: IdentityVerifier) -> None:
        """Initialize identity service.

        Args:
            verifier: Identity provider token verifier
        """
        self.verifier = verifier

    async def verify_token(self, token: str | None) -> IdentityClaims:
        """Verify a bearer token.

        Args:
            token: Raw token, without the "Bearer " prefix

        Returns:
            Verified claims

        Raises:
            AuthenticationError: If the token is missing or invalid
        """
        with logfire.span("identity_service.verify_token"):
            if not token:
                logfire.warn("Missing bearer token")
                raise AuthenticationError("Missing bearer token")

            claims = await self.verifier.verify(token)
            logfire.info("Token verified", subject=claims.subject)
            return claims
