"""PostgreSQL implementation of Project repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Project
from hive.domain.repository import ProjectRepository
from hive.domain.value import ProjectId, TeamId
from hive.persistence.mappers import project_to_dict, row_to_project
from hive.persistence.tables import projects_table


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_in_team(
        self, project_id: ProjectId, team_id: TeamId
    ) -> Optional[Project]:
        """Find a project of the given team."""
        stmt = select(projects_table).where(
            projects_table.c.id == project_id, projects_table.c.team_id == team_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_by_team(self, team_id: TeamId) -> List[Project]:
        """Find a team's projects, newest first."""
        stmt = (
            select(projects_table)
            .where(projects_table.c.team_id == team_id)
            .order_by(projects_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def find_many(self, project_ids: List[ProjectId]) -> List[Project]:
        """Find projects by IDs."""
        if not project_ids:
            return []
        stmt = select(projects_table).where(projects_table.c.id.in_(project_ids))
        result = await self.session.execute(stmt)
        return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        project_dict = project_to_dict(project)
        existing = await self.find_by_id(project.id)

        if existing:
            stmt = (
                update(projects_table)
                .where(projects_table.c.id == project.id)
                .values(**project_dict)
            )
        else:
            stmt = insert(projects_table).values(**project_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return project

    async def delete(self, project_id: ProjectId) -> None:
        """Delete a project."""
        stmt = delete(projects_table).where(projects_table.c.id == project_id)
        await self.session.execute(stmt)
