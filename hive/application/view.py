"""Populated read models returned by the API and pushed to team rooms.

Entities reference each other by id; views embed the referenced project and
user summaries the clients render.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from hive.application.usecase.base import WireModel
from hive.domain.model import Activity, Invitation, Message, Project, Task, Team, User
from hive.domain.service import ProjectService, UserService
from hive.domain.value import (
    ActivityType,
    EntityType,
    InvitationState,
    ProjectStatus,
    Role,
    TaskStatus,
)


class UserSummary(WireModel):
    """Embedded user reference."""

    id: UUID
    name: str
    email: str

    @classmethod
    def of(cls, user: User | None) -> "UserSummary | None":
        if user is None:
            return None
        return cls(id=user.id, name=user.name, email=user.email)


class UserView(WireModel):
    """User as returned by the API."""

    id: UUID
    email: str
    name: str
    role: Role
    team_id: UUID | None
    created_at: datetime

    @classmethod
    def of(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            team_id=user.team_id,
            created_at=user.created_at,
        )


class TeamView(WireModel):
    """Team as returned by the API."""

    id: UUID
    name: str
    description: str
    admin_id: UUID
    member_ids: list[UUID]
    is_default: bool
    created_at: datetime

    @classmethod
    def of(cls, team: Team) -> "TeamView":
        return cls(
            id=team.id,
            name=team.name,
            description=team.description,
            admin_id=team.admin_id,
            member_ids=list(team.member_ids),
            is_default=team.is_default,
            created_at=team.created_at,
        )


class ProjectSummary(WireModel):
    """Embedded project reference."""

    id: UUID
    name: str
    status: ProjectStatus


class ProjectView(WireModel):
    """Project as returned by the API."""

    id: UUID
    name: str
    description: str
    status: ProjectStatus
    team_id: UUID
    created_by: UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def of(cls, project: Project) -> "ProjectView":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            status=project.status,
            team_id=project.team_id,
            created_by=project.created_by,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class TaskView(WireModel):
    """Task with its project and assignee embedded."""

    id: UUID
    title: str
    description: str
    status: TaskStatus
    project_id: UUID
    assigned_to: UUID | None
    project: ProjectSummary | None
    assignee: UserSummary | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def of(
        cls, task: Task, project: Project | None, assignee: User | None
    ) -> "TaskView":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            project_id=task.project_id,
            assigned_to=task.assigned_to,
            project=(
                ProjectSummary(id=project.id, name=project.name, status=project.status)
                if project
                else None
            ),
            assignee=UserSummary.of(assignee),
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class MessageView(WireModel):
    """Chat message with its sender embedded."""

    id: UUID
    content: str
    sender_id: UUID
    team_id: UUID
    sender: UserSummary | None
    created_at: datetime

    @classmethod
    def of(cls, message: Message, sender: User | None) -> "MessageView":
        return cls(
            id=message.id,
            content=message.content,
            sender_id=message.sender_id,
            team_id=message.team_id,
            sender=UserSummary.of(sender),
            created_at=message.created_at,
        )


class ActivityView(WireModel):
    """Activity with its actor embedded."""

    id: UUID
    type: ActivityType
    description: str
    actor_id: UUID
    actor: UserSummary | None
    team_id: UUID
    entity_id: UUID | None
    entity_type: EntityType | None
    metadata: dict[str, Any]
    created_at: datetime

    @classmethod
    def of(cls, activity: Activity, actor: User | None) -> "ActivityView":
        return cls(
            id=activity.id,
            type=activity.type,
            description=activity.description,
            actor_id=activity.actor_id,
            actor=UserSummary.of(actor),
            team_id=activity.team_id,
            entity_id=activity.entity_id,
            entity_type=activity.entity_type,
            metadata=dict(activity.metadata),
            created_at=activity.created_at,
        )


class InvitationView(WireModel):
    """Invitation with creator and consumer embedded."""

    id: UUID
    code: str
    email: str | None
    role: Role
    used: bool
    state: InvitationState
    created_by: UserSummary | None
    used_by: UserSummary | None
    expires_at: datetime
    created_at: datetime

    @classmethod
    def of(
        cls,
        invitation: Invitation,
        now: datetime,
        creator: User | None,
        consumer: User | None,
    ) -> "InvitationView":
        return cls(
            id=invitation.id,
            code=invitation.code.root,
            email=invitation.email,
            role=invitation.role,
            used=invitation.used,
            state=invitation.state(now),
            created_by=UserSummary.of(creator),
            used_by=UserSummary.of(consumer),
            expires_at=invitation.expires_at,
            created_at=invitation.created_at,
        )


async def task_views(
    tasks: list[Task],
    project_service: ProjectService,
    user_service: UserService,
) -> list[TaskView]:
    """Populate tasks with two batched lookups."""
    projects = await project_service.get_many([t.project_id for t in tasks])
    users = await user_service.get_many([t.assigned_to for t in tasks if t.assigned_to])
    return [
        TaskView.of(
            task,
            projects.get(task.project_id),
            users.get(task.assigned_to) if task.assigned_to else None,
        )
        for task in tasks
    ]


async def message_views(
    messages: list[Message], user_service: UserService
) -> list[MessageView]:
    """Populate messages with their senders."""
    users = await user_service.get_many([m.sender_id for m in messages])
    return [MessageView.of(m, users.get(m.sender_id)) for m in messages]


async def activity_views(
    activities: list[Activity], user_service: UserService
) -> list[ActivityView]:
    """Populate activities with their actors."""
    users = await user_service.get_many([a.actor_id for a in activities])
    return [ActivityView.of(a, users.get(a.actor_id)) for a in activities]
