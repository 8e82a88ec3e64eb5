"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from hive.domain.error import BusinessRuleViolationError, NotFoundError
from hive.domain.repository import UserRepository
from hive.domain.service import UserService
from hive.domain.value import IdentityClaims, Role, UserId
from tests.harness import create_env_fixture, make_staffed_team, make_user

# Unit test fixture
unit_env = create_env_fixture()


class TestChangeRole:
    """Tests for change_role."""

    @pytest.mark.asyncio
    async def test_only_admin_cannot_demote_themselves(self, unit_env):
        """The sole ADMIN of a team keeps their role."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        staff = await make_staffed_team(unit_env)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="only admin"):
            await user_service.change_role(staff.admin, staff.admin.id, Role.MEMBER)

        stored = await user_repo.find_by_id(staff.admin.id)
        assert stored.role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_admin_can_step_down_when_another_admin_exists(self, unit_env):
        """With a second ADMIN, demoting oneself is allowed."""
        user_service = await unit_env.get(UserService)
        staff = await make_staffed_team(unit_env)
        await make_user(unit_env, "dave", role=Role.ADMIN, team=staff.team)

        updated = await user_service.change_role(
            staff.admin, staff.admin.id, Role.MANAGER
        )

        assert updated.role == Role.MANAGER

    @pytest.mark.asyncio
    async def test_admin_promotes_team_member(self, unit_env):
        """Changing another member's role is applied."""
        user_service = await unit_env.get(UserService)
        staff = await make_staffed_team(unit_env)

        updated = await user_service.change_role(
            staff.admin, staff.member.id, Role.MANAGER
        )

        assert updated.id == staff.member.id
        assert updated.role == Role.MANAGER

    @pytest.mark.asyncio
    async def test_target_in_other_team_is_not_found(self, unit_env):
        """Users of other teams cannot be targeted."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        staff = await make_staffed_team(unit_env)
        other = await make_staffed_team(unit_env, prefix="x")

        with pytest.raises(NotFoundError):
            await user_service.change_role(staff.admin, other.member.id, Role.ADMIN)

        stored = await user_repo.find_by_id(other.member.id)
        assert stored.role == Role.MEMBER

    @pytest.mark.asyncio
    async def test_unknown_target_is_not_found(self, unit_env):
        """An unknown user id raises NotFoundError."""
        user_service = await unit_env.get(UserService)
        staff = await make_staffed_team(unit_env)

        with pytest.raises(NotFoundError):
            await user_service.change_role(staff.admin, UserId(uuid4()), Role.MEMBER)


class TestCreateUser:
    """Tests for create_user."""

    @pytest.mark.asyncio
    async def test_create_user_from_claims(self, unit_env):
        """Claims provide the subject, lowercased email and display name."""
        user_service = await unit_env.get(UserService)
        claims = IdentityClaims(subject="uid-1", email="Dave@Example.com", name=None)

        user = await user_service.create_user(claims)

        assert user.external_id == "uid-1"
        assert user.email == "dave@example.com"
        assert user.name == "Dave"
        assert user.role == Role.MEMBER
        assert user.team_id is None
        assert await user_service.get_by_email("dave@example.com") == user

    @pytest.mark.asyncio
    async def test_overrides_take_precedence(self, unit_env):
        """Explicit email and name override the token claims."""
        user_service = await unit_env.get(UserService)
        claims = IdentityClaims(subject="uid-2", email="x@example.com", name="X")

        user = await user_service.create_user(
            claims, role=Role.MANAGER, email="erin@example.com", name=" Erin Smith "
        )

        assert user.email == "erin@example.com"
        assert user.name == "Erin Smith"
        assert user.role == Role.MANAGER


class TestListTeam:
    """Tests for list_team."""

    @pytest.mark.asyncio
    async def test_members_sorted_by_role_then_name(self, unit_env):
        """Admins come first, then managers, then members by name."""
        user_service = await unit_env.get(UserService)
        staff = await make_staffed_team(unit_env)
        await make_user(unit_env, "aaron", role=Role.MEMBER, team=staff.team)

        users = await user_service.list_team(staff.team.id)

        assert [u.name for u in users] == ["Alice", "Bob", "Aaron", "Carol"]
