"""Shared in-memory storage backing the in-memory repositories."""

from dataclasses import dataclass, field

from hive.domain.model import Activity, Invitation, Message, Project, Task, Team, User
from hive.domain.value import InvitationId, ProjectId, TaskId, TeamId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    One store is shared by every repository of a container, so data written
    in one request is visible to the next.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    teams: dict[TeamId, Team] = field(default_factory=dict)
    projects: dict[ProjectId, Project] = field(default_factory=dict)
    tasks: dict[TaskId, Task] = field(default_factory=dict)
    messages: list[Message] = field(default_factory=list)
    invitations: dict[InvitationId, Invitation] = field(default_factory=dict)
    activities: list[Activity] = field(default_factory=list)

    def clear(self) -> None:
        """Drop all data."""
        self.users.clear()
        self.teams.clear()
        self.projects.clear()
        self.tasks.clear()
        self.messages.clear()
        self.invitations.clear()
        self.activities.clear()
