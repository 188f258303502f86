"""Project repository."""
from __future__ import annotations

from uuid import UUID

from tasker_service.domain.models import Project, ProjectData
from tasker_service.repositories.base import BaseRepository
from tasker_service.repositories.store import PROJECTS


class ProjectRepository(BaseRepository[ProjectData, Project]):
    """CRUD operations for projects."""

    collection = PROJECTS
    data_model = ProjectData
    record_model = Project
    not_found_message = "Project not found"

    async def create(self, owner_id: UUID, title: str, description: str | None = None) -> Project:
        return await self._insert(
            {
                "title": title,
                "description": description or "",
                "owner_id": owner_id,
                "collaborators": [],
            }
        )

    async def list_by_owner(self, owner_id: UUID) -> list[Project]:
        docs = await self._store.find_many(self.collection, {"owner_id": str(owner_id)})
        return [self._to_model(doc) for doc in docs]

    async def update(
        self,
        project: Project,
        *,
        title: str | None = None,
        description: str | None = None,
    ) -> Project:
        fields: dict[str, object] = {}
        if title is not None:
            fields["title"] = title
        if description is not None:
            fields["description"] = description
        if not fields:
            return project
        return await self._update(project, fields)

    async def set_collaborators(self, project: Project, collaborators: list[UUID]) -> Project:
        return await self._update(project, {"collaborators": collaborators})
