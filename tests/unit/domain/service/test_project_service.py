"""Unit tests for ProjectService."""

import pytest

from hive.domain.error import NotFoundError, ValidationError
from hive.domain.repository import (
    ActivityRepository,
    ProjectRepository,
    TaskRepository,
)
from hive.domain.service import ProjectService
from hive.domain.value import ActivityType, EntityType, ProjectStatus
from tests.harness import (
    create_env_fixture,
    make_project,
    make_staffed_team,
    make_task,
)

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateProject:
    """Tests for create_project."""

    @pytest.mark.asyncio
    async def test_create_project_in_actor_team(self, unit_env):
        """A new project belongs to the creator's team and is audited."""
        # Arrange
        project_service = await unit_env.get(ProjectService)
        activity_repo = await unit_env.get(ActivityRepository)
        staff = await make_staffed_team(unit_env)

        # Act
        project = await project_service.create_project(
            staff.manager, "  Brand refresh  ", description="New logo"
        )

        # Assert
        assert project.name == "Brand refresh"
        assert project.team_id == staff.team.id
        assert project.created_by == staff.manager.id
        assert project.status == ProjectStatus.ACTIVE

        activities = await activity_repo.find_by_team(staff.team.id)
        assert len(activities) == 1
        assert activities[0].type == ActivityType.PROJECT_CREATED
        assert activities[0].entity_type == EntityType.PROJECT
        assert activities[0].entity_id == project.id


class TestListAndGetProject:
    """Tests for list_projects and get_project."""

    @pytest.mark.asyncio
    async def test_list_only_returns_team_projects(self, unit_env):
        """Projects of other teams are not listed."""
        project_service = await unit_env.get(ProjectService)
        staff = await make_staffed_team(unit_env)
        other = await make_staffed_team(unit_env, prefix="x")
        ours = await make_project(unit_env, staff.team, staff.admin, name="Ours")
        await make_project(unit_env, other.team, other.admin, name="Theirs")

        projects = await project_service.list_projects(staff.team.id)

        assert [p.id for p in projects] == [ours.id]

    @pytest.mark.asyncio
    async def test_get_project_of_other_team_is_not_found(self, unit_env):
        """Another team's project should raise NotFoundError."""
        project_service = await unit_env.get(ProjectService)
        staff = await make_staffed_team(unit_env)
        other = await make_staffed_team(unit_env, prefix="x")
        theirs = await make_project(unit_env, other.team, other.admin)

        with pytest.raises(NotFoundError):
            await project_service.get_project(theirs.id, staff.team.id)


class TestUpdateProject:
    """Tests for update_project."""

    @pytest.mark.asyncio
    async def test_update_applies_changes(self, unit_env):
        """Submitted fields are applied and an update is audited."""
        project_service = await unit_env.get(ProjectService)
        activity_repo = await unit_env.get(ActivityRepository)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)

        updated = await project_service.update_project(
            staff.manager, project.id, {"status": ProjectStatus.ON_HOLD}
        )

        assert updated.status == ProjectStatus.ON_HOLD
        assert updated.name == project.name
        assert updated.updated_at >= project.updated_at

        activities = await activity_repo.find_by_team(staff.team.id)
        assert activities[0].type == ActivityType.PROJECT_UPDATED
        assert activities[0].metadata == {"status": "on-hold"}

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_fields(self, unit_env):
        """Fields outside name/description/status are rejected."""
        project_service = await unit_env.get(ProjectService)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)

        with pytest.raises(ValidationError) as exc_info:
            await project_service.update_project(
                staff.admin, project.id, {"team_id": staff.team.id}
            )

        assert exc_info.value.details == [
            {"field": "team_id", "message": "Field cannot be updated"}
        ]


class TestDeleteProject:
    """Tests for delete_project."""

    @pytest.mark.asyncio
    async def test_delete_removes_project_and_its_tasks(self, unit_env):
        """Deleting a project cascades to its tasks and nothing else."""
        # Arrange
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        task_repo = await unit_env.get(TaskRepository)
        staff = await make_staffed_team(unit_env)
        doomed = await make_project(unit_env, staff.team, staff.admin, name="Doomed")
        kept = await make_project(unit_env, staff.team, staff.admin, name="Kept")
        doomed_tasks = [
            await make_task(unit_env, doomed, title=f"Doomed {i}") for i in range(3)
        ]
        kept_task = await make_task(unit_env, kept, title="Survivor")

        # Act
        await project_service.delete_project(staff.admin, doomed.id)

        # Assert
        assert await project_repo.find_by_id(doomed.id) is None
        for task in doomed_tasks:
            assert await task_repo.find_by_id(task.id) is None
        assert await task_repo.find_by_id(kept_task.id) is not None

    @pytest.mark.asyncio
    async def test_delete_project_of_other_team_is_not_found(self, unit_env):
        """Another team's project cannot be deleted."""
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        staff = await make_staffed_team(unit_env)
        other = await make_staffed_team(unit_env, prefix="x")
        theirs = await make_project(unit_env, other.team, other.admin)

        with pytest.raises(NotFoundError):
            await project_service.delete_project(staff.admin, theirs.id)

        assert await project_repo.find_by_id(theirs.id) is not None
