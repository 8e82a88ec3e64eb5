"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, List
from uuid import UUID

from hive.domain.model import Activity, Invitation, Message, Project, Task, Team, User
from hive.domain.value import (
    ActivityId,
    ActivityType,
    EntityType,
    InvitationCode,
    InvitationId,
    MessageId,
    ProjectId,
    ProjectStatus,
    Role,
    TaskId,
    TaskStatus,
    TeamId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    team_id = _optional_uuid(row.get("team_id"))
    return User(
        id=UserId(_uuid(row["id"])),
        external_id=row["external_id"],
        email=row["email"],
        name=row["name"],
        role=Role(row["role"]),
        team_id=TeamId(team_id) if team_id else None,
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "external_id": user.external_id,
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
        "team_id": user.team_id,
        "created_at": user.created_at,
    }


def row_to_team(row: Dict[str, Any], member_ids: List[UUID]) -> Team:
    """Convert database row plus ordered member ids to Team domain model.

    Args:
        row: Team row as dict
        member_ids: Member user ids in join order

    Returns:
        Team domain model
    """
    return Team(
        id=TeamId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description") or "",
        admin_id=UserId(_uuid(row["admin_id"])),
        member_ids=[UserId(_uuid(m)) for m in member_ids],
        is_default=row["is_default"],
        created_at=row["created_at"],
    )


def team_to_dict(team: Team) -> Dict[str, Any]:
    """Convert Team domain model to database dict (without members)."""
    return {
        "id": team.id,
        "name": team.name,
        "description": team.description,
        "admin_id": team.admin_id,
        "is_default": team.is_default,
        "created_at": team.created_at,
    }


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model."""
    return Project(
        id=ProjectId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description") or "",
        status=ProjectStatus(row["status"]),
        team_id=TeamId(_uuid(row["team_id"])),
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    return {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "status": project.status.value,
        "team_id": project.team_id,
        "created_by": project.created_by,
        "created_at": project.created_at,
        "updated_at": project.updated_at,
    }


def row_to_task(row: Dict[str, Any]) -> Task:
    """Convert database row to Task domain model."""
    assigned_to = _optional_uuid(row.get("assigned_to"))
    return Task(
        id=TaskId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description") or "",
        status=TaskStatus(row["status"]),
        project_id=ProjectId(_uuid(row["project_id"])),
        assigned_to=UserId(assigned_to) if assigned_to else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def task_to_dict(task: Task) -> Dict[str, Any]:
    """Convert Task domain model to database dict."""
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "project_id": task.project_id,
        "assigned_to": task.assigned_to,
        "created_at": task.created_at,
        "updated_at": task.updated_at,
    }


def row_to_message(row: Dict[str, Any]) -> Message:
    """Convert database row to Message domain model."""
    return Message(
        id=MessageId(_uuid(row["id"])),
        content=row["content"],
        sender_id=UserId(_uuid(row["sender_id"])),
        team_id=TeamId(_uuid(row["team_id"])),
        created_at=row["created_at"],
    )


def message_to_dict(message: Message) -> Dict[str, Any]:
    """Convert Message domain model to database dict."""
    return {
        "id": message.id,
        "content": message.content,
        "sender_id": message.sender_id,
        "team_id": message.team_id,
        "created_at": message.created_at,
    }


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    used_by = _optional_uuid(row.get("used_by"))
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        code=InvitationCode(row["code"]),
        team_id=TeamId(_uuid(row["team_id"])),
        created_by=UserId(_uuid(row["created_by"])),
        email=row.get("email"),
        role=Role(row["role"]),
        used=row["used"],
        used_by=UserId(used_by) if used_by else None,
        expires_at=row["expires_at"],
        created_at=row["created_at"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict."""
    return {
        "id": invitation.id,
        "code": invitation.code.root,
        "team_id": invitation.team_id,
        "created_by": invitation.created_by,
        "email": invitation.email,
        "role": invitation.role.value,
        "used": invitation.used,
        "used_by": invitation.used_by,
        "expires_at": invitation.expires_at,
        "created_at": invitation.created_at,
    }


def row_to_activity(row: Dict[str, Any]) -> Activity:
    """Convert database row to Activity domain model."""
    return Activity(
        id=ActivityId(_uuid(row["id"])),
        type=ActivityType(row["type"]),
        description=row["description"],
        actor_id=UserId(_uuid(row["actor_id"])),
        team_id=TeamId(_uuid(row["team_id"])),
        entity_id=_optional_uuid(row.get("entity_id")),
        entity_type=EntityType(row["entity_type"]) if row.get("entity_type") else None,
        metadata=row.get("metadata") or {},
        created_at=row["created_at"],
    )


def activity_to_dict(activity: Activity) -> Dict[str, Any]:
    """Convert Activity domain model to database dict."""
    return {
        "id": activity.id,
        "type": activity.type.value,
        "description": activity.description,
        "actor_id": activity.actor_id,
        "team_id": activity.team_id,
        "entity_id": activity.entity_id,
        "entity_type": activity.entity_type.value if activity.entity_type else None,
        "metadata": activity.metadata,
        "created_at": activity.created_at,
    }
