"""Domain value objects for Hive.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from hive.domain.value.common import RootValueObject, ValueObject


class Role(str, Enum):
    """Team role, controlling route- and field-level permissions."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"

    @property
    def rank(self) -> int:
        """Sort position used when listing team members (admins first)."""
        return _ROLE_RANK[self]


_ROLE_RANK = {Role.ADMIN: 0, Role.MANAGER: 1, Role.MEMBER: 2}


class ProjectStatus(str, Enum):
    """Lifecycle status of a project."""

    ACTIVE = "active"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


class TaskStatus(str, Enum):
    """Status of a task."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class ActivityType(str, Enum):
    """Kinds of audited domain events."""

    PROJECT_CREATED = "project_created"
    PROJECT_UPDATED = "project_updated"
    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    TASK_ASSIGNED = "task_assigned"
    MESSAGE_SENT = "message_sent"
    USER_JOINED = "user_joined"
    INVITATION_CREATED = "invitation_created"


class EntityType(str, Enum):
    """Type of entity an activity refers to."""

    PROJECT = "project"
    TASK = "task"
    MESSAGE = "message"
    USER = "user"
    INVITATION = "invitation"


class InvitationState(str, Enum):
    """Derived state of an invitation (computed at read time)."""

    ACTIVE = "active"
    USED = "used"
    EXPIRED = "expired"


class RealtimeEvent(str, Enum):
    """Events pushed to a team room."""

    MESSAGE_RECEIVED = "message-received"
    TASK_UPDATE_RECEIVED = "task-update-received"
    PROJECT_UPDATE_RECEIVED = "project-update-received"


class TaskSortField(str, Enum):
    """Sortable task columns (wire names)."""

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TITLE = "title"
    STATUS = "status"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class InvitationCode(RootValueObject[str]):
    """Random, unguessable invitation code (lowercase hex)."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is non-empty hex."""
        if not re.match(r"^[0-9a-f]{8,128}$", v):
            raise ValueError("Invitation code must be 8-128 lowercase hex characters")
        return v


class IdentityClaims(ValueObject):
    """Verified claims of an external identity token."""

    subject: str  # Provider user id (Firebase uid)
    email: str
    name: str | None = None

    @property
    def display_name(self) -> str:
        """Name to use for a new account, falling back to the email local part."""
        return self.name or self.email.split("@")[0]
