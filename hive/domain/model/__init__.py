"""Domain model entities for Hive."""

from hive.domain.model.activity import Activity
from hive.domain.model.invitation import Invitation
from hive.domain.model.message import Message
from hive.domain.model.project import Project
from hive.domain.model.task import Task
from hive.domain.model.team import Team
from hive.domain.model.user import User

__all__ = [
    "User",
    "Team",
    "Project",
    "Task",
    "Message",
    "Invitation",
    "Activity",
]
