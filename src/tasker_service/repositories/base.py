"""Shared helpers for typed repositories."""
from __future__ import annotations

from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

from tasker_service.core.exceptions import NotFoundError
from tasker_service.domain.models import parse_record
from tasker_service.repositories.store import Document, DocumentStore

RecordT = TypeVar("RecordT", bound=BaseModel)
DataT = TypeVar("DataT", bound=BaseModel)


class BaseRepository(Generic[DataT, RecordT]):
    """Typed access to one collection of the document store."""

    collection: str
    data_model: type[DataT]
    record_model: type[RecordT]
    not_found_message: str = "Resource not found"

    def __init__(self, store: DocumentStore):
        self._store = store

    def _to_model(self, doc: Document) -> RecordT:
        return parse_record(self.record_model, doc)

    async def _insert(self, data: dict[str, Any]) -> RecordT:
        checked = parse_record(self.data_model, data)
        doc = await self._store.insert(self.collection, checked.model_dump(mode="json"))
        return self._to_model(doc)

    async def _update(self, current: RecordT, fields: dict[str, Any]) -> RecordT:
        """Validate ``current`` merged with ``fields`` before writing only ``fields``."""
        merged = {**current.model_dump(include=set(self.data_model.model_fields)), **fields}
        checked = parse_record(self.data_model, merged)
        payload = checked.model_dump(mode="json", include=set(fields))
        doc = await self._store.update_by_id(self.collection, current.id, payload)  # type: ignore[attr-defined]
        if doc is None:
            raise NotFoundError(self.not_found_message)
        return self._to_model(doc)

    async def find(self, record_id: UUID) -> RecordT | None:
        doc = await self._store.find_by_id(self.collection, record_id)
        return self._to_model(doc) if doc else None

    async def get(self, record_id: UUID) -> RecordT:
        record = await self.find(record_id)
        if record is None:
            raise NotFoundError(self.not_found_message)
        return record

    async def delete(self, record_id: UUID) -> None:
        if not await self._store.delete_by_id(self.collection, record_id):
            raise NotFoundError(self.not_found_message)
