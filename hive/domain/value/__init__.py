"""Domain value objects for Hive."""

from hive.domain.value.identifiers import (
    ActivityId,
    InvitationId,
    MessageId,
    ProjectId,
    TaskId,
    TeamId,
    UserId,
)
from hive.domain.value.types import (
    ActivityType,
    EntityType,
    IdentityClaims,
    InvitationCode,
    InvitationState,
    ProjectStatus,
    RealtimeEvent,
    Role,
    SortOrder,
    TaskSortField,
    TaskStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "TeamId",
    "ProjectId",
    "TaskId",
    "MessageId",
    "InvitationId",
    "ActivityId",
    # Types
    "Role",
    "ProjectStatus",
    "TaskStatus",
    "ActivityType",
    "EntityType",
    "InvitationState",
    "InvitationCode",
    "IdentityClaims",
    "RealtimeEvent",
    "TaskSortField",
    "SortOrder",
]
