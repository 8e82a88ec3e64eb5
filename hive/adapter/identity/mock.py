"""Locally signed identity tokens for tests and development."""

from datetime import timedelta

import logfire

from hive.config import AuthSettings
from hive.domain.error import AuthenticationError
from hive.domain.service.identity_service import IdentityVerifier
from hive.domain.value import IdentityClaims
from hive.util.jwt import JWTError, create_token, verify_token


class MockIdentityVerifier(IdentityVerifier):
    """Identity verifier for HS256 tokens signed with a shared secret.

    Tokens carry the same claims as provider ID tokens, so the rest of the
    application cannot tell the difference.
    """

    def __init__(self, auth_settings: AuthSettings):
        self.auth_settings = auth_settings

    def issue(
        self,
        subject: str,
        email: str,
        name: str | None = None,
        expires_in: timedelta = timedelta(hours=1),
    ) -> str:
        """Mint a token accepted by this verifier.

        Args:
            subject: External subject id
            email: Email claim
            name: Optional display name
            expires_in: Token lifetime (negative for an already expired token)

        Returns:
            Encoded token
        """
        return create_token(
            subject=subject,
            email=email,
            name=name,
            secret=self.auth_settings.mock_token_secret,
            algorithm=self.auth_settings.mock_token_algorithm,
            expires_in=expires_in,
        )

    async def verify(self, token: str) -> IdentityClaims:
        """Verify a locally signed token.

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        try:
            return verify_token(
                token,
                self.auth_settings.mock_token_secret,
                algorithms=[self.auth_settings.mock_token_algorithm],
            )
        except JWTError as e:
            logfire.warn("Mock token verification failed", error=str(e))
            raise AuthenticationError(str(e)) from e
