"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hive.config import Settings
from hive.domain.repository import (
    ActivityRepository,
    InvitationRepository,
    MessageRepository,
    ProjectRepository,
    TaskRepository,
    TeamRepository,
    Transaction,
    UserRepository,
)
from hive.persistence.database import (
    create_engine,
    create_session_factory,
    unit_of_work,
)
from hive.persistence.repository import (
    PostgresActivityRepository,
    PostgresInvitationRepository,
    PostgresMessageRepository,
    PostgresProjectRepository,
    PostgresTaskRepository,
    PostgresTeamRepository,
    PostgresTransaction,
    PostgresUserRepository,
)
from hive.util.di.base import ProviderBase
from hive.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed when the request finishes cleanly, rolled back if an
        exception escapes. Use cases that broadcast a write commit it earlier
        through `Transaction`.
        """
        async with unit_of_work(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_transaction(self, session: AsyncSession) -> Transaction:
        """Provide the request transaction."""
        return PostgresTransaction(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_team_repository(self, session: AsyncSession) -> TeamRepository:
        """Provide Team repository."""
        return PostgresTeamRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, session: AsyncSession) -> ProjectRepository:
        """Provide Project repository."""
        return PostgresProjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, session: AsyncSession) -> TaskRepository:
        """Provide Task repository."""
        return PostgresTaskRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        """Provide Message repository."""
        return PostgresMessageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(
        self, session: AsyncSession
    ) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_activity_repository(self, session: AsyncSession) -> ActivityRepository:
        """Provide Activity repository."""
        return PostgresActivityRepository(session)
