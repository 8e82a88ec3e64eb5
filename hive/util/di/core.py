"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from hive.config import (
    ActivitySettings,
    AuthSettings,
    InvitationSettings,
    MessageSettings,
    Settings,
    TeamSettings,
)
from hive.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_team_settings(self, settings: Settings) -> TeamSettings:
        """Provide default team settings."""
        return settings.teams

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_message_settings(self, settings: Settings) -> MessageSettings:
        """Provide chat settings."""
        return settings.messages

    @provide(scope=Scope.APP)
    def provide_activity_settings(self, settings: Settings) -> ActivitySettings:
        """Provide activity feed settings."""
        return settings.activities
