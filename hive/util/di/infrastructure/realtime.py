"""Realtime infrastructure provider."""

from dishka import AnyOf, Scope, provide

from hive.adapter.realtime import RoomRegistry
from hive.config import Settings
from hive.domain.service import Broadcaster
from hive.util.di.base import ProviderBase


class ProdRealtimeProvider(ProviderBase):
    """Team rooms shared by the WebSocket endpoint and the use cases."""

    @provide(scope=Scope.APP)
    def get_room_registry(
        self, settings: Settings
    ) -> AnyOf[RoomRegistry, Broadcaster]:
        """Provide the process-wide room registry."""
        return RoomRegistry(send_timeout=settings.realtime.send_timeout_seconds)
