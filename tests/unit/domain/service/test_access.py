"""Unit tests for role-based access rules."""

from uuid import uuid4

import pytest

from hive.domain.error import NotAuthorizedError
from hive.domain.model import Task, User
from hive.domain.service.access import (
    ADMINS,
    MANAGERS,
    can_grant,
    check_task_update,
    require_role,
)
from hive.domain.value import ProjectId, Role, TaskId, TeamId, UserId


def _user(role: Role) -> User:
    return User(
        id=UserId(uuid4()),
        external_id=f"ext-{role.value.lower()}",
        email=f"{role.value.lower()}@example.com",
        name=role.value.title(),
        role=role,
        team_id=TeamId(uuid4()),
    )


def _task(assignee: User | None = None) -> Task:
    return Task(
        id=TaskId(uuid4()),
        title="Write copy",
        project_id=ProjectId(uuid4()),
        assigned_to=assignee.id if assignee else None,
    )


class TestRequireRole:
    """Tests for require_role."""

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.MANAGER])
    def test_allowed_roles_pass(self, role):
        require_role(_user(role), MANAGERS)

    def test_member_rejected_from_manager_gate(self):
        with pytest.raises(NotAuthorizedError):
            require_role(_user(Role.MEMBER), MANAGERS)

    def test_manager_rejected_from_admin_gate(self):
        with pytest.raises(NotAuthorizedError):
            require_role(_user(Role.MANAGER), ADMINS)


class TestCheckTaskUpdate:
    """Tests for the per-field task update gate."""

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.MANAGER])
    def test_unrestricted_roles_may_change_anything(self, role):
        check_task_update(_user(role), _task(), {"title", "assigned_to", "status"})

    def test_member_may_change_status_of_own_task(self):
        member = _user(Role.MEMBER)
        check_task_update(member, _task(member), {"status"})

    def test_member_field_outside_allow_list_rejects_whole_update(self):
        member = _user(Role.MEMBER)
        with pytest.raises(NotAuthorizedError, match="status"):
            check_task_update(member, _task(member), {"status", "title"})

    def test_member_cannot_touch_other_tasks(self):
        member = _user(Role.MEMBER)
        with pytest.raises(NotAuthorizedError, match="assigned to you"):
            check_task_update(member, _task(_user(Role.MANAGER)), {"status"})


class TestCanGrant:
    """Tests for can_grant."""

    @pytest.mark.parametrize(
        "granter,role,allowed",
        [
            (Role.ADMIN, Role.ADMIN, True),
            (Role.ADMIN, Role.MEMBER, True),
            (Role.MANAGER, Role.MANAGER, True),
            (Role.MANAGER, Role.MEMBER, True),
            (Role.MANAGER, Role.ADMIN, False),
        ],
    )
    def test_grants_up_to_own_role(self, granter, role, allowed):
        assert can_grant(_user(granter), role) is allowed
