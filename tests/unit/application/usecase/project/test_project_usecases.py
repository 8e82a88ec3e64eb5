"""Unit tests for the project use cases."""

import pytest

from hive.adapter.realtime import RoomRegistry
from hive.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from hive.domain.error import NotAuthorizedError
from hive.domain.value import ProjectStatus
from tests.harness import (
    RecordingConnection,
    create_env_fixture,
    make_project,
    make_staffed_team,
)

# Unit test fixture
unit_env = create_env_fixture()


class TestProjectRoleGates:
    """Role allow-lists of the project use cases."""

    @pytest.mark.asyncio
    async def test_member_cannot_create_project(self, unit_env):
        create = await unit_env.get(CreateProjectUseCase)
        staff = await make_staffed_team(unit_env)

        with pytest.raises(NotAuthorizedError):
            await create.execute(CreateProjectRequest(caller=staff.member, name="Nope"))

    @pytest.mark.asyncio
    async def test_manager_cannot_delete_project(self, unit_env):
        delete = await unit_env.get(DeleteProjectUseCase)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)

        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteProjectRequest(caller=staff.manager, project_id=project.id)
            )

    @pytest.mark.asyncio
    async def test_manager_creates_project(self, unit_env):
        create = await unit_env.get(CreateProjectUseCase)
        staff = await make_staffed_team(unit_env)

        view = await create.execute(
            CreateProjectRequest(caller=staff.manager, name="Q3 launch")
        )

        assert view.name == "Q3 launch"
        assert view.team_id == staff.team.id


class TestUpdateProject:
    """Tests for UpdateProjectUseCase."""

    @pytest.mark.asyncio
    async def test_update_is_broadcast_to_team_room(self, unit_env):
        """Project updates are pushed as project-update-received."""
        update = await unit_env.get(UpdateProjectUseCase)
        rooms = await unit_env.get(RoomRegistry)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        connection = RecordingConnection()
        rooms.join(connection, staff.team.id)

        view = await update.execute(
            UpdateProjectRequest(
                caller=staff.admin,
                project_id=project.id,
                changes={"status": ProjectStatus.COMPLETED},
            )
        )

        assert view.status == ProjectStatus.COMPLETED
        assert [e["event"] for e in connection.sent] == ["project-update-received"]
        assert connection.sent[0]["data"]["status"] == "completed"
