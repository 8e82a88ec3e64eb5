"""Mock identity providers for testing."""

from dishka import AnyOf, Scope, provide

from hive.adapter.identity import MockIdentityVerifier
from hive.config import AuthSettings
from hive.domain.service import IdentityVerifier
from hive.util.di.infrastructure.identity import IdentityProvider


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider accepting locally signed tokens.

    Tests resolve `MockIdentityVerifier` to mint tokens for their users.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_verifier(
        self, auth_settings: AuthSettings
    ) -> AnyOf[MockIdentityVerifier, IdentityVerifier]:
        """Provide mock token verifier."""
        return MockIdentityVerifier(auth_settings)
