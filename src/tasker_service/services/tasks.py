"""Task service."""
from __future__ import annotations

from typing import Any
from uuid import UUID

import structlog

from tasker_service.core.exceptions import NotFoundError
from tasker_service.domain.enums import AccessMode, TaskStatus
from tasker_service.domain.models import Project, Task, coerce_status
from tasker_service.repositories.projects import ProjectRepository
from tasker_service.repositories.tasks import TaskRepository
from tasker_service.services import access

logger = structlog.get_logger(__name__)


class TaskService:
    """Service for task operations.

    Tasks are visible to and editable by every project member; only the
    project owner may delete them.
    """

    def __init__(self, task_repo: TaskRepository, project_repo: ProjectRepository) -> None:
        self.task_repo = task_repo
        self.project_repo = project_repo

    async def _load_authorized(
        self, task_id: UUID, user_id: UUID, mode: AccessMode
    ) -> tuple[Task, Project]:
        task = await self.task_repo.get(task_id)
        project = await self.project_repo.find(task.project_id)
        if project is None:
            logger.warning("orphaned_task", task_id=str(task_id), project_id=str(task.project_id))
            raise NotFoundError("Parent project not found")
        access.require_task_access(user_id, task, project, mode)
        return task, project

    async def create_task(
        self,
        project_id: UUID,
        user_id: UUID,
        title: str,
        description: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> Task:
        project = await self.project_repo.get(project_id)
        access.require_project_access(user_id, project, access.TASK_CREATE)

        initial = TaskStatus.TODO if status is None else coerce_status(status)
        task = await self.task_repo.create(project_id, title, description, initial)
        logger.info("task_created", task_id=str(task.id), project_id=str(project_id))
        return task

    async def list_tasks(self, project_id: UUID, user_id: UUID) -> list[Task]:
        project = await self.project_repo.get(project_id)
        access.require_project_access(user_id, project, access.TASK_LIST)
        return await self.task_repo.list_by_project(project_id)

    async def get_task(self, task_id: UUID, user_id: UUID) -> Task:
        task, _ = await self._load_authorized(task_id, user_id, access.TASK_READ)
        return task

    async def update_task(
        self,
        task_id: UUID,
        user_id: UUID,
        *,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> Task:
        """Apply every supplied field or none of them."""
        task, _ = await self._load_authorized(task_id, user_id, access.TASK_UPDATE)

        fields: dict[str, Any] = {}
        if status is not None:
            draft = task.model_copy()
            fields["status"] = draft.set_status(status)
        if title is not None:
            fields["title"] = title
        if description is not None:
            fields["description"] = description

        updated = await self.task_repo.update(task, fields)
        if "status" in fields and fields["status"] != task.status:
            logger.info(
                "task_status_changed",
                task_id=str(task_id),
                old=task.status.value,
                new=updated.status.value,
            )
        return updated

    async def set_status(self, task_id: UUID, user_id: UUID, status: TaskStatus | str) -> Task:
        return await self.update_task(task_id, user_id, status=status)

    async def delete_task(self, task_id: UUID, user_id: UUID) -> None:
        await self._load_authorized(task_id, user_id, access.TASK_DELETE)
        await self.task_repo.delete(task_id)
        logger.info("task_deleted", task_id=str(task_id))
