"""Unit tests for UpdateTaskUseCase."""

import pytest
from pydantic import ValidationError as ModelValidationError

from hive.adapter.realtime import RoomRegistry
from hive.application.usecase.task import UpdateTaskRequest, UpdateTaskUseCase
from hive.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from hive.domain.service import TaskService, UserService
from hive.domain.value import TaskStatus
from tests.harness import (
    EventJournal,
    RecordingConnection,
    create_env_fixture,
    make_project,
    make_staffed_team,
    make_task,
)

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateTask:
    """Tests for updating a task through the use case."""

    @pytest.mark.asyncio
    async def test_update_is_broadcast_to_team_room(self, unit_env):
        """The updated task view is pushed to the team room only."""
        # Arrange
        use_case = await unit_env.get(UpdateTaskUseCase)
        rooms = await unit_env.get(RoomRegistry)
        staff = await make_staffed_team(unit_env)
        other = await make_staffed_team(unit_env, prefix="x")
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project, assignee=staff.member)

        teammate, outsider = RecordingConnection(), RecordingConnection()
        rooms.join(teammate, staff.team.id)
        rooms.join(outsider, other.team.id)

        # Act
        view = await use_case.execute(
            UpdateTaskRequest(
                caller=staff.member,
                task_id=task.id,
                changes={"status": TaskStatus.DONE},
            )
        )

        # Assert
        assert view.status == TaskStatus.DONE
        assert view.assignee.id == staff.member.id
        assert view.project.name == project.name

        assert outsider.sent == []
        assert len(teammate.sent) == 1
        event = teammate.sent[0]
        assert event["event"] == "task-update-received"
        assert event["data"]["id"] == str(task.id)
        assert event["data"]["status"] == "done"
        assert event["data"]["assignedTo"] == str(staff.member.id)

    @pytest.mark.asyncio
    async def test_rejected_update_is_not_broadcast(self, unit_env):
        """Nothing is pushed when the field gate rejects the update."""
        use_case = await unit_env.get(UpdateTaskUseCase)
        rooms = await unit_env.get(RoomRegistry)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project, assignee=staff.member)
        connection = RecordingConnection()
        rooms.join(connection, staff.team.id)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateTaskRequest(
                    caller=staff.member,
                    task_id=task.id,
                    changes={"title": "Renamed"},
                )
            )

        assert connection.sent == []

    @pytest.mark.asyncio
    async def test_task_of_other_team_is_not_found(self, unit_env):
        """Updating a task of another team raises NotFoundError."""
        use_case = await unit_env.get(UpdateTaskUseCase)
        staff = await make_staffed_team(unit_env)
        other = await make_staffed_team(unit_env, prefix="x")
        project = await make_project(unit_env, other.team, other.admin)
        task = await make_task(unit_env, project)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateTaskRequest(
                    caller=staff.admin,
                    task_id=task.id,
                    changes={"status": TaskStatus.DONE},
                )
            )

    @pytest.mark.asyncio
    async def test_update_is_committed_before_broadcast(self, unit_env):
        """Peers that refetch on the push must see the new state."""
        journal = EventJournal()
        use_case = UpdateTaskUseCase(
            task_service=await unit_env.get(TaskService),
            user_service=await unit_env.get(UserService),
            transaction=journal,
            broadcaster=journal,
        )
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project, assignee=staff.member)

        await use_case.execute(
            UpdateTaskRequest(
                caller=staff.member,
                task_id=task.id,
                changes={"status": TaskStatus.IN_PROGRESS},
            )
        )

        assert journal.entries == ["commit", "task-update-received"]

    @pytest.mark.asyncio
    async def test_rejected_update_is_neither_committed_nor_broadcast(
        self, unit_env
    ):
        journal = EventJournal()
        use_case = UpdateTaskUseCase(
            task_service=await unit_env.get(TaskService),
            user_service=await unit_env.get(UserService),
            transaction=journal,
            broadcaster=journal,
        )
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project, assignee=staff.member)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateTaskRequest(
                    caller=staff.member,
                    task_id=task.id,
                    changes={"status": TaskStatus.DONE, "project_id": project.id},
                )
            )

        assert journal.entries == []


class TestUpdateTaskFields:
    """Field handling for privileged updates."""

    @pytest.mark.asyncio
    async def test_title_is_trimmed(self, unit_env):
        use_case = await unit_env.get(UpdateTaskUseCase)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project)

        view = await use_case.execute(
            UpdateTaskRequest(
                caller=staff.manager,
                task_id=task.id,
                changes={"title": "  Ship it  ", "description": " now "},
            )
        )

        assert view.title == "Ship it"
        assert view.description == "now"

    @pytest.mark.asyncio
    async def test_title_too_short_after_trimming_is_rejected(self, unit_env):
        """Surrounding whitespace does not count towards the minimum length."""
        use_case = await unit_env.get(UpdateTaskUseCase)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project)

        with pytest.raises(ModelValidationError):
            await use_case.execute(
                UpdateTaskRequest(
                    caller=staff.admin,
                    task_id=task.id,
                    changes={"title": "  ab "},
                )
            )

    @pytest.mark.asyncio
    async def test_null_title_is_rejected(self, unit_env):
        use_case = await unit_env.get(UpdateTaskUseCase)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                UpdateTaskRequest(
                    caller=staff.admin,
                    task_id=task.id,
                    changes={"title": None},
                )
            )

        assert exc_info.value.details == [
            {"field": "title", "message": "Field cannot be null"}
        ]

    @pytest.mark.asyncio
    async def test_null_assignee_clears_assignment(self, unit_env):
        use_case = await unit_env.get(UpdateTaskUseCase)
        staff = await make_staffed_team(unit_env)
        project = await make_project(unit_env, staff.team, staff.admin)
        task = await make_task(unit_env, project, assignee=staff.member)

        view = await use_case.execute(
            UpdateTaskRequest(
                caller=staff.manager,
                task_id=task.id,
                changes={"assigned_to": None},
            )
        )

        assert view.assigned_to is None
        assert view.assignee is None
