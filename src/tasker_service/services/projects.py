"""Project service."""
from __future__ import annotations

from uuid import UUID

import structlog

from tasker_service.domain.models import Project, User
from tasker_service.repositories.projects import ProjectRepository
from tasker_service.repositories.tasks import TaskRepository
from tasker_service.repositories.users import UserRepository
from tasker_service.services import access
from tasker_service.services.invitations import invite_collaborator

logger = structlog.get_logger(__name__)


class ProjectService:
    """Service for project operations."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        user_repo: UserRepository,
        task_repo: TaskRepository,
    ) -> None:
        self.project_repo = project_repo
        self.user_repo = user_repo
        self.task_repo = task_repo

    async def create_project(
        self,
        owner_id: UUID,
        title: str,
        description: str | None = None,
    ) -> Project:
        """Create a project owned by ``owner_id``."""
        project = await self.project_repo.create(owner_id, title, description)
        logger.info("project_created", project_id=str(project.id), owner_id=str(owner_id))
        return project

    async def list_owned_projects(self, user_id: UUID) -> list[Project]:
        """Projects owned by the user, newest first."""
        return await self.project_repo.list_by_owner(user_id)

    async def get_project(self, project_id: UUID, user_id: UUID) -> Project:
        """Get project by ID (owner only)."""
        project = await self.project_repo.get(project_id)
        access.require_project_access(user_id, project, access.PROJECT_READ)
        return project

    async def update_project(
        self,
        project_id: UUID,
        user_id: UUID,
        title: str | None = None,
        description: str | None = None,
    ) -> Project:
        """Update title and/or description (owner only)."""
        project = await self.project_repo.get(project_id)
        access.require_project_access(user_id, project, access.PROJECT_UPDATE)
        return await self.project_repo.update(project, title=title, description=description)

    async def delete_project(self, project_id: UUID, user_id: UUID) -> None:
        """Delete project and its tasks (owner only)."""
        project = await self.project_repo.get(project_id)
        access.require_project_access(user_id, project, access.PROJECT_DELETE)

        removed = await self.task_repo.delete_by_project(project_id)
        await self.project_repo.delete(project_id)
        logger.info("project_deleted", project_id=str(project_id), tasks_removed=removed)

    async def invite(self, project_id: UUID, user_id: UUID, email: str) -> tuple[Project, User]:
        """Invite a registered user as collaborator (owner only)."""
        project = await self.project_repo.get(project_id)
        access.require_project_access(user_id, project, access.PROJECT_INVITE)

        updated, collaborator = await invite_collaborator(
            project,
            email,
            users=self.user_repo,
            projects=self.project_repo,
        )
        logger.info(
            "collaborator_invited",
            project_id=str(project_id),
            collaborator_id=str(collaborator.id),
        )
        return updated, collaborator

    async def list_collaborators(self, project_id: UUID, user_id: UUID) -> list[User]:
        """Collaborator accounts of a project (owner only)."""
        project = await self.get_project(project_id, user_id)
        users = []
        for collaborator_id in project.collaborators:
            user = await self.user_repo.find(collaborator_id)
            if user is None:
                logger.warning(
                    "missing_collaborator",
                    project_id=str(project_id),
                    user_id=str(collaborator_id),
                )
                continue
            users.append(user)
        return users
