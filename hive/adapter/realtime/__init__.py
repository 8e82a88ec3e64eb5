"""Real-time broadcast adapters."""

from .rooms import RoomRegistry

__all__ = ["RoomRegistry"]
