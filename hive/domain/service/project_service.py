"""Project domain service."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire

from hive.domain.error import NotFoundError, ValidationError
from hive.domain.model import Project, User
from hive.domain.repository import ProjectRepository, TaskRepository
from hive.domain.value import (
    ActivityType,
    EntityType,
    ProjectId,
    ProjectStatus,
    TeamId,
)

from .activity_service import ActivityService
from .base import Service

UPDATABLE_FIELDS = frozenset({"name", "description", "status"})


class ProjectService(Service):
    """Domain service for team-scoped project operations."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        task_repository: TaskRepository,
        activity_service: ActivityService,
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            task_repository: Task repository (for cascading deletes)
            activity_service: Activity audit service
        """
        self.project_repository = project_repository
        self.task_repository = task_repository
        self.activity_service = activity_service

    async def list_projects(self, team_id: TeamId) -> list[Project]:
        """List a team's projects, newest first."""
        with logfire.span("project_service.list_projects", team_id=str(team_id)):
            projects = await self.project_repository.find_by_team(team_id)
            logfire.info(
                "Projects listed", team_id=str(team_id), count=len(projects)
            )
            return projects

    async def get_project(self, project_id: ProjectId, team_id: TeamId) -> Project:
        """Get a project of the team.

        Raises:
            NotFoundError: If the project does not exist in the team
        """
        with logfire.span(
            "project_service.get_project",
            project_id=str(project_id),
            team_id=str(team_id),
        ):
            project = await self.project_repository.find_in_team(project_id, team_id)
            if not project:
                logfire.warn("Project not found", project_id=str(project_id))
                raise NotFoundError("Project", str(project_id))
            return project

    async def get_many(self, project_ids: list[ProjectId]) -> dict[ProjectId, Project]:
        """Get projects by ID, keyed by ID."""
        if not project_ids:
            return {}
        projects = await self.project_repository.find_many(list(set(project_ids)))
        return {project.id: project for project in projects}

    async def create_project(
        self,
        actor: User,
        name: str,
        description: str = "",
        status: ProjectStatus = ProjectStatus.ACTIVE,
    ) -> Project:
        """Create a project in the actor's team.

        Args:
            actor: Creating user
            name: Project name
            description: Optional description
            status: Initial status

        Returns:
            Created project
        """
        with logfire.span(
            "project_service.create_project", actor_id=str(actor.id), name=name
        ):
            team_id = self.team_of(actor)
            now = datetime.now(timezone.utc)
            project = Project(
                id=ProjectId(uuid4()),
                name=name.strip(),
                description=description.strip(),
                status=status,
                team_id=team_id,
                created_by=actor.id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.project_repository.save(project)

            await self.activity_service.record(
                type=ActivityType.PROJECT_CREATED,
                description=f'{actor.name} created project "{saved.name}"',
                actor_id=actor.id,
                team_id=team_id,
                entity_id=saved.id,
                entity_type=EntityType.PROJECT,
            )
            logfire.info("Project created", project_id=str(saved.id))
            return saved

    async def update_project(
        self, actor: User, project_id: ProjectId, changes: dict[str, Any]
    ) -> Project:
        """Update a project of the actor's team.

        Args:
            actor: Updating user
            project_id: Project to update
            changes: Field values to apply (name, description, status)

        Returns:
            Updated project

        Raises:
            NotFoundError: If the project is not in the actor's team
            ValidationError: If an unknown field is submitted
        """
        with logfire.span(
            "project_service.update_project",
            actor_id=str(actor.id),
            project_id=str(project_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - UPDATABLE_FIELDS
            if unknown:
                raise ValidationError(
                    "Unknown project fields",
                    details=[
                        {"field": field, "message": "Field cannot be updated"}
                        for field in sorted(unknown)
                    ],
                )

            project = await self.get_project(project_id, self.team_of(actor))
            updated = Project.model_validate(
                {
                    **project.model_dump(),
                    **changes,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.project_repository.save(updated)

            await self.activity_service.record(
                type=ActivityType.PROJECT_UPDATED,
                description=f'{actor.name} updated project "{saved.name}"',
                actor_id=actor.id,
                team_id=saved.team_id,
                entity_id=saved.id,
                entity_type=EntityType.PROJECT,
                metadata={"status": saved.status.value},
            )
            logfire.info("Project updated", project_id=str(saved.id))
            return saved

    async def delete_project(self, actor: User, project_id: ProjectId) -> None:
        """Delete a project of the actor's team together with its tasks.

        Raises:
            NotFoundError: If the project is not in the actor's team
        """
        with logfire.span(
            "project_service.delete_project",
            actor_id=str(actor.id),
            project_id=str(project_id),
        ):
            project = await self.get_project(project_id, self.team_of(actor))
            removed = await self.task_repository.delete_by_project(project.id)
            await self.project_repository.delete(project.id)
            logfire.info(
                "Project deleted", project_id=str(project.id), tasks_removed=removed
            )
