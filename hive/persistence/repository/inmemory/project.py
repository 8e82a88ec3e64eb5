"""In-memory project repository for testing."""

from typing import List, Optional

from hive.domain.model import Project
from hive.domain.repository import ProjectRepository
from hive.domain.value import ProjectId, TeamId

from .store import InMemoryStore


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return self._store.projects.get(project_id)

    async def find_in_team(
        self, project_id: ProjectId, team_id: TeamId
    ) -> Optional[Project]:
        """Find a project of the given team."""
        project = self._store.projects.get(project_id)
        if project and project.team_id == team_id:
            return project
        return None

    async def find_by_team(self, team_id: TeamId) -> List[Project]:
        """Find a team's projects, newest first."""
        projects = [p for p in self._store.projects.values() if p.team_id == team_id]
        projects.sort(key=lambda p: p.created_at, reverse=True)
        return projects

    async def find_many(self, project_ids: List[ProjectId]) -> List[Project]:
        """Find projects by IDs."""
        return [
            self._store.projects[pid]
            for pid in project_ids
            if pid in self._store.projects
        ]

    async def save(self, project: Project) -> Project:
        """Save a project."""
        self._store.projects[project.id] = project
        return project

    async def delete(self, project_id: ProjectId) -> None:
        """Delete a project."""
        self._store.projects.pop(project_id, None)
