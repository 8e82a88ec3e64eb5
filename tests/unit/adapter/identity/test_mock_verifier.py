"""Unit tests for the locally signed identity tokens."""

from datetime import timedelta

import pytest

from hive.adapter.identity import MockIdentityVerifier
from hive.config import AuthSettings
from hive.domain.error import AuthenticationError


@pytest.fixture
def verifier():
    return MockIdentityVerifier(AuthSettings())


class TestMockIdentityVerifier:
    """Tests for issuing and verifying local tokens."""

    @pytest.mark.asyncio
    async def test_issued_token_verifies(self, verifier):
        token = verifier.issue(subject="uid-1", email="alice@example.com", name="Alice")

        claims = await verifier.verify(token)

        assert claims.subject == "uid-1"
        assert claims.email == "alice@example.com"
        assert claims.display_name == "Alice"

    @pytest.mark.asyncio
    async def test_display_name_falls_back_to_email(self, verifier):
        claims = await verifier.verify(
            verifier.issue(subject="uid-2", email="bob.smith@example.com")
        )

        assert claims.name is None
        assert claims.display_name == "bob.smith"

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, verifier):
        token = verifier.issue(
            subject="uid-1",
            email="alice@example.com",
            expires_in=timedelta(seconds=-5),
        )

        with pytest.raises(AuthenticationError, match="expired"):
            await verifier.verify(token)

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret_is_rejected(self, verifier):
        other = MockIdentityVerifier(
            AuthSettings(mock_token_secret="another-secret-that-is-long-enough-too")
        )
        token = other.issue(subject="uid-1", email="alice@example.com")

        with pytest.raises(AuthenticationError):
            await verifier.verify(token)
