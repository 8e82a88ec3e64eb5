"""Unit tests for TeamService."""

import pytest

from hive.domain.repository import ActivityRepository, TeamRepository
from hive.domain.service import TeamService
from hive.domain.value import ActivityType, Role
from tests.harness import create_env_fixture, make_team, make_user

# Unit test fixture
unit_env = create_env_fixture()


class TestAssignDefaultTeam:
    """Tests for assign_default_team."""

    @pytest.mark.asyncio
    async def test_creates_default_team_when_missing(self, unit_env):
        """Without a default team, one is created with the user as ADMIN."""
        # Arrange
        team_service = await unit_env.get(TeamService)
        team_repo = await unit_env.get(TeamRepository)
        activity_repo = await unit_env.get(ActivityRepository)
        user = await make_user(unit_env, "dave")

        # Act
        updated = await team_service.assign_default_team(user)

        # Assert
        team = await team_repo.find_default()
        assert team.name == "Company Team"
        assert team.admin_id == user.id
        assert team.member_ids == [user.id]
        assert updated.team_id == team.id
        assert updated.role == Role.ADMIN

        activities = await activity_repo.find_by_team(team.id)
        assert [a.type for a in activities] == [ActivityType.USER_JOINED]
        assert activities[0].actor_id == user.id

    @pytest.mark.asyncio
    async def test_joins_existing_default_team_keeping_role(self, unit_env):
        """With a default team, the user is appended as a regular member."""
        team_service = await unit_env.get(TeamService)
        team_repo = await unit_env.get(TeamRepository)
        team, admin = await make_team(unit_env, "alice")
        user = await make_user(unit_env, "dave")

        updated = await team_service.assign_default_team(user)

        assert updated.team_id == team.id
        assert updated.role == Role.MEMBER
        stored = await team_repo.find_by_id(team.id)
        assert stored.member_ids == [admin.id, user.id]
        assert stored.admin_id == admin.id

    @pytest.mark.asyncio
    async def test_membership_is_not_duplicated(self, unit_env):
        """Assigning twice leaves a single membership."""
        team_service = await unit_env.get(TeamService)
        team_repo = await unit_env.get(TeamRepository)
        team, _ = await make_team(unit_env, "alice")
        user = await make_user(unit_env, "dave")

        await team_service.assign_default_team(user)
        await team_service.assign_default_team(user)

        stored = await team_repo.find_by_id(team.id)
        assert stored.member_ids.count(user.id) == 1


class TestEnsureDefaultTeam:
    """Tests for ensure_default_team."""

    @pytest.mark.asyncio
    async def test_at_most_one_default_team(self, unit_env):
        """A second call returns the existing default team."""
        team_service = await unit_env.get(TeamService)
        first_admin = await make_user(unit_env, "alice", role=Role.ADMIN)
        second_admin = await make_user(unit_env, "bob", role=Role.ADMIN)

        first = await team_service.ensure_default_team(first_admin)
        second = await team_service.ensure_default_team(second_admin)

        assert first.id == second.id
        assert second.admin_id == first_admin.id


class TestRepairMembership:
    """Tests for repair_membership."""

    @pytest.mark.asyncio
    async def test_assigns_unassigned_users(self, unit_env):
        """Users without a team are added to the default team."""
        team_service = await unit_env.get(TeamService)
        team, admin = await make_team(unit_env, "alice")
        stray = [await make_user(unit_env, name) for name in ("dave", "erin")]

        report = await team_service.repair_membership(admin)

        assert report.total_users == 3
        assert report.users_fixed == 2
        assert report.users_in_team == 3
        assert report.team.id == team.id
        assert {u.id for u in report.members} == {admin.id, *(u.id for u in stray)}

    @pytest.mark.asyncio
    async def test_repair_is_idempotent(self, unit_env):
        """Running the repair again fixes nothing."""
        team_service = await unit_env.get(TeamService)
        _, admin = await make_team(unit_env, "alice")
        await make_user(unit_env, "dave")

        await team_service.repair_membership(admin)
        report = await team_service.repair_membership(admin)

        assert report.users_fixed == 0
        assert report.users_in_team == 2
