"""Verification of Firebase ID tokens.

Firebase signs ID tokens with RS256 and publishes its current public keys
as a JWK set. Tokens must carry the project id as audience and
`https://securetoken.google.com/<project>` as issuer.
"""

import asyncio
import time

import httpx
import jwt
import logfire

from hive.adapter.error import ProviderError
from hive.config import AuthSettings
from hive.domain.error import AuthenticationError
from hive.domain.service.identity_service import IdentityVerifier
from hive.domain.value import IdentityClaims
from hive.util.error import ConfigurationError
from hive.util.jwt import JWTError, verify_token


class FirebaseIdentityVerifier(IdentityVerifier):
    """Verifies Firebase ID tokens against the published JWK set.

    Keys are cached for `jwks_cache_seconds` and refetched when a token
    references an unknown key id (Google rotates keys regularly).
    """

    def __init__(self, auth_settings: AuthSettings, http_client: httpx.AsyncClient):
        """Initialize verifier.

        Args:
            auth_settings: Auth configuration (project id, JWKS URL, cache TTL)
            http_client: Shared HTTP client for key fetches

        Raises:
            ConfigurationError: If the identity project id is not configured
        """
        if auth_settings.identity_project_id == "CHANGE_ME_IN_PRODUCTION":
            raise ConfigurationError(
                "AUTH__IDENTITY_PROJECT_ID", "must be set to verify identity tokens"
            )
        self.auth_settings = auth_settings
        self.http_client = http_client
        self._keys: dict[str, jwt.PyJWK] = {}
        self._fetched_at = 0.0
        self._lock = asyncio.Lock()

    async def verify(self, token: str) -> IdentityClaims:
        """Verify a Firebase ID token.

        Args:
            token: Raw ID token

        Returns:
            Verified identity claims

        Raises:
            AuthenticationError: If the token is malformed, unsigned by a known
                key, expired, or issued for another project
        """
        with logfire.span("firebase.verify"):
            try:
                header = jwt.get_unverified_header(token)
            except jwt.InvalidTokenError:
                raise AuthenticationError("Invalid token")

            kid = header.get("kid")
            if not kid:
                raise AuthenticationError("Invalid token")

            key = await self._get_key(kid)
            if key is None:
                logfire.warn("Unknown signing key", kid=kid)
                raise AuthenticationError("Invalid token")

            try:
                return verify_token(
                    token,
                    key.key,
                    algorithms=["RS256"],
                    audience=self.auth_settings.identity_project_id,
                    issuer=self.auth_settings.issuer,
                    leeway=self.auth_settings.token_leeway_seconds,
                )
            except JWTError as e:
                logfire.warn("Token verification failed", error=str(e))
                raise AuthenticationError(str(e)) from e

    async def _get_key(self, kid: str) -> jwt.PyJWK | None:
        expired = (
            time.monotonic() - self._fetched_at > self.auth_settings.jwks_cache_seconds
        )
        if kid in self._keys and not expired:
            return self._keys[kid]

        async with self._lock:
            # Another request may have refreshed while we waited
            expired = (
                time.monotonic() - self._fetched_at
                > self.auth_settings.jwks_cache_seconds
            )
            if kid not in self._keys or expired:
                await self._refresh_keys()
        return self._keys.get(kid)

    async def _refresh_keys(self) -> None:
        with logfire.span("firebase.refresh_keys", url=self.auth_settings.jwks_url):
            try:
                response = await self.http_client.get(self.auth_settings.jwks_url)
                response.raise_for_status()
                jwk_set = jwt.PyJWKSet.from_dict(response.json())
            except (httpx.HTTPError, jwt.PyJWKSetError, ValueError) as e:
                logfire.error("Failed to fetch signing keys", error=str(e))
                raise ProviderError(
                    "identity", f"Failed to fetch signing keys: {e}"
                ) from e

            self._keys = {key.key_id: key for key in jwk_set.keys if key.key_id}
            self._fetched_at = time.monotonic()
            logfire.info("Signing keys refreshed", count=len(self._keys))
