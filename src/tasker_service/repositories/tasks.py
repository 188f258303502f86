"""Task repository."""
from __future__ import annotations

from typing import Any
from uuid import UUID

from tasker_service.domain.enums import TaskStatus
from tasker_service.domain.models import Task, TaskData
from tasker_service.repositories.base import BaseRepository
from tasker_service.repositories.store import TASKS


class TaskRepository(BaseRepository[TaskData, Task]):
    """CRUD operations for tasks."""

    collection = TASKS
    data_model = TaskData
    record_model = Task
    not_found_message = "Task not found"

    async def create(
        self,
        project_id: UUID,
        title: str,
        description: str | None = None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        return await self._insert(
            {
                "title": title,
                "description": description or "",
                "status": status,
                "project_id": project_id,
            }
        )

    async def list_by_project(self, project_id: UUID) -> list[Task]:
        docs = await self._store.find_many(self.collection, {"project_id": str(project_id)})
        return [self._to_model(doc) for doc in docs]

    async def update(self, task: Task, fields: dict[str, Any]) -> Task:
        if not fields:
            return task
        return await self._update(task, fields)

    async def delete_by_project(self, project_id: UUID) -> int:
        return await self._store.delete_many(self.collection, {"project_id": str(project_id)})
