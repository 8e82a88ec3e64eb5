"""Unit tests for settings."""

from hive.config import FrontendSettings, Settings


class TestFrontendSettings:
    """Frontend URL handling."""

    def test_invitation_url(self):
        frontend = FrontendSettings(url="https://hive.example.com/")

        assert (
            frontend.invitation_url("ab12cd34")
            == "https://hive.example.com/join/ab12cd34"
        )

    def test_allowed_origins_are_deduplicated(self):
        frontend = FrontendSettings(
            url="https://hive.example.com",
            extra_origins=["https://hive.example.com", "https://preview.example.com"],
        )

        assert frontend.allowed_origins == [
            "https://hive.example.com",
            "https://preview.example.com",
        ]


class TestSettings:
    """Environment-driven settings."""

    def test_nested_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("INVITATIONS__EXPIRY_DAYS", "3")
        monkeypatch.setenv("FRONTEND__URL", "https://app.example.com")

        settings = Settings()

        assert settings.invitations.expiry_days == 3
        assert settings.frontend.url == "https://app.example.com"
        assert not settings.is_production

    def test_issuer_follows_project(self):
        settings = Settings(auth={"identity_project_id": "hive-prod"})

        assert settings.auth.issuer == "https://securetoken.google.com/hive-prod"
