"""Shared base for domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Timezone-aware current time; all stored timestamps are UTC."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; services derive updated copies with
    `model_copy(update=...)` and hand them to a repository to persist.
    """

    model_config = ConfigDict(frozen=True)
