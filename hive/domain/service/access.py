"""Role-based access rules.

Route-level gates are declarative allow-lists of roles. Task updates are
additionally gated per field.
"""

from typing import Iterable

from hive.domain.error import NotAuthorizedError
from hive.domain.model import Task, User
from hive.domain.value import Role

ALL_ROLES = frozenset({Role.ADMIN, Role.MANAGER, Role.MEMBER})
MANAGERS = frozenset({Role.ADMIN, Role.MANAGER})
ADMINS = frozenset({Role.ADMIN})

# Task fields each role may change; None means unrestricted
TASK_UPDATE_FIELDS: dict[Role, frozenset[str] | None] = {
    Role.ADMIN: None,
    Role.MANAGER: None,
    Role.MEMBER: frozenset({"status"}),
}


def require_role(user: User, allowed: frozenset[Role]) -> None:
    """Reject users whose role is not in the allow-list.

    Args:
        user: Authenticated caller
        allowed: Roles permitted to perform the operation

    Raises:
        NotAuthorizedError: If the caller's role is not allowed
    """
    if user.role not in allowed:
        raise NotAuthorizedError(
            f"Role {user.role.value} is not allowed to perform this action"
        )


def check_task_update(user: User, task: Task, fields: Iterable[str]) -> None:
    """Apply the field-level gate for task updates.

    Restricted roles may only touch tasks assigned to them, and only the
    fields in their allow-list. Disallowed fields are rejected, never dropped.

    Raises:
        NotAuthorizedError: If the update is not permitted
    """
    allowed = TASK_UPDATE_FIELDS.get(user.role, frozenset())
    if allowed is None:
        return

    if not task.is_assigned_to(user.id):
        raise NotAuthorizedError("You can only update tasks assigned to you")

    rejected = sorted(set(fields) - allowed)
    if rejected:
        raise NotAuthorizedError(
            f"You can only update task {', '.join(sorted(allowed))}"
        )


def can_grant(user: User, role: Role) -> bool:
    """Whether the user may hand out the given role through an invitation."""
    return role.rank >= user.role.rank
