from __future__ import annotations

import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from tasker_service.core.exceptions import DuplicateDocumentError
from tasker_service.main import create_app
from tasker_service.repositories.projects import ProjectRepository
from tasker_service.repositories.store import COLLECTIONS, USERS, Document, DocumentStore
from tasker_service.repositories.tasks import TaskRepository
from tasker_service.repositories.users import UserRepository
from tasker_service.settings import settings

# Cheapest cost bcrypt accepts.
settings.bcrypt_rounds = 4


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store with the same document shape as the Postgres one."""

    def __init__(self) -> None:
        self.collections: dict[str, dict[uuid.UUID, Document]] = {c: {} for c in COLLECTIONS}
        self._tick = 0

    def _now(self) -> datetime:
        # Strictly increasing so "newest first" ordering is deterministic.
        self._tick += 1
        return datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=self._tick)

    @staticmethod
    def _matches(doc: Document, filters: Document) -> bool:
        return all(doc.get(key) == value for key, value in filters.items())

    async def find_by_id(self, collection: str, doc_id: uuid.UUID) -> Document | None:
        doc = self.collections[collection].get(doc_id)
        return copy.deepcopy(doc) if doc else None

    async def find_one(self, collection: str, filters: Document) -> Document | None:
        for doc in self.collections[collection].values():
            if self._matches(doc, filters):
                return copy.deepcopy(doc)
        return None

    async def find_many(self, collection: str, filters: Document) -> list[Document]:
        docs = [
            copy.deepcopy(doc)
            for doc in self.collections[collection].values()
            if self._matches(doc, filters)
        ]
        return sorted(docs, key=lambda d: d["created_at"], reverse=True)

    async def insert(self, collection: str, doc: Document) -> Document:
        if collection == USERS and any(
            u["email"] == doc["email"] for u in self.collections[USERS].values()
        ):
            raise DuplicateDocumentError()
        now = self._now()
        stored = {**copy.deepcopy(doc), "id": uuid.uuid4(), "created_at": now, "updated_at": now}
        self.collections[collection][stored["id"]] = stored
        return copy.deepcopy(stored)

    async def update_by_id(
        self, collection: str, doc_id: uuid.UUID, fields: Document
    ) -> Document | None:
        doc = self.collections[collection].get(doc_id)
        if doc is None:
            return None
        doc.update(copy.deepcopy(fields))
        doc["updated_at"] = self._now()
        return copy.deepcopy(doc)

    async def delete_by_id(self, collection: str, doc_id: uuid.UUID) -> bool:
        return self.collections[collection].pop(doc_id, None) is not None

    async def delete_many(self, collection: str, filters: Document) -> int:
        doomed = [
            doc_id
            for doc_id, doc in self.collections[collection].items()
            if self._matches(doc, filters)
        ]
        for doc_id in doomed:
            del self.collections[collection][doc_id]
        return len(doomed)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def user_repo(store):
    return UserRepository(store)


@pytest.fixture
def project_repo(store):
    return ProjectRepository(store)


@pytest.fixture
def task_repo(store):
    return TaskRepository(store)


@pytest.fixture
async def service_client(aiohttp_client, store):
    app = create_app(store=store)
    return await aiohttp_client(app)


@pytest.fixture
def register_user(service_client):
    async def _register(name: str, email: str, password: str = "secret123") -> dict[str, Any]:
        resp = await service_client.post(
            "/api/users/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status == 201, await resp.text()
        return await resp.json()

    return _register
