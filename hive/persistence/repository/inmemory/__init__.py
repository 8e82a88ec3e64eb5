"""In-memory repository implementations for testing."""

from .activity import InMemoryActivityRepository
from .invitation import InMemoryInvitationRepository
from .message import InMemoryMessageRepository
from .project import InMemoryProjectRepository
from .store import InMemoryStore
from .task import InMemoryTaskRepository
from .team import InMemoryTeamRepository
from .transaction import InMemoryTransaction
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryInvitationRepository",
    "InMemoryMessageRepository",
    "InMemoryProjectRepository",
    "InMemoryStore",
    "InMemoryTaskRepository",
    "InMemoryTeamRepository",
    "InMemoryTransaction",
    "InMemoryUserRepository",
]
