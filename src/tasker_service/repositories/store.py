"""Document store contract used by the repositories."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

USERS = "users"
PROJECTS = "projects"
TASKS = "tasks"

COLLECTIONS = frozenset({USERS, PROJECTS, TASKS})

Document = dict[str, Any]


class DocumentStore(ABC):
    """Async document store.

    Documents are JSON-compatible mappings. ``insert`` assigns ``id``,
    ``created_at`` and ``updated_at``; ``update_by_id`` merges the given
    fields into the stored document and refreshes ``updated_at``. Filters
    are equality matches on top-level fields. Writes that break a unique
    index (user email) raise DuplicateDocumentError.
    """

    @abstractmethod
    async def find_by_id(self, collection: str, doc_id: UUID) -> Document | None: ...

    @abstractmethod
    async def find_one(self, collection: str, filters: Document) -> Document | None: ...

    @abstractmethod
    async def find_many(self, collection: str, filters: Document) -> list[Document]:
        """Return matching documents, newest first."""

    @abstractmethod
    async def insert(self, collection: str, doc: Document) -> Document: ...

    @abstractmethod
    async def update_by_id(
        self, collection: str, doc_id: UUID, fields: Document
    ) -> Document | None: ...

    @abstractmethod
    async def delete_by_id(self, collection: str, doc_id: UUID) -> bool: ...

    @abstractmethod
    async def delete_many(self, collection: str, filters: Document) -> int: ...
