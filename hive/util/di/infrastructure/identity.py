"""Identity provider infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import httpx

from hive.adapter.identity import FirebaseIdentityVerifier
from hive.config import AuthSettings
from hive.domain.service import IdentityVerifier
from hive.util.di.base import ProviderBase
from hive.util.observability import instrument_httpx


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider verifying Firebase ID tokens."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the HTTP client used for JWKS fetches.

        Closed when the container shuts down.
        """
        async with httpx.AsyncClient(timeout=10.0) as client:
            instrument_httpx(client)
            yield client

    @provide(scope=Scope.APP)
    def get_identity_verifier(
        self, auth_settings: AuthSettings, http_client: httpx.AsyncClient
    ) -> IdentityVerifier:
        """Provide Firebase token verifier.

        The verifier caches the signing keys, so it lives for the whole app.
        """
        return FirebaseIdentityVerifier(
            auth_settings=auth_settings, http_client=http_client
        )
