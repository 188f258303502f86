"""PostgreSQL-backed document store: one JSONB document table per collection."""
from __future__ import annotations

import json
from typing import Any
from uuid import UUID

import asyncpg  # type: ignore[import-untyped]
from asyncpg import Pool, Record  # type: ignore[import-untyped]

from tasker_service.core.exceptions import DuplicateDocumentError
from tasker_service.repositories.store import COLLECTIONS, Document, DocumentStore


class PostgresDocumentStore(DocumentStore):
    """Stores documents as ``(id, data jsonb, created_at, updated_at)`` rows."""

    def __init__(self, pool: Pool):
        self._pool = pool

    @staticmethod
    def _table(collection: str) -> str:
        # Table names cannot be bound as parameters.
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection {collection!r}")
        return collection

    @staticmethod
    def _to_document(record: Record) -> Document:
        data = record["data"]
        if isinstance(data, str):
            data = json.loads(data)
        return {
            **data,
            "id": record["id"],
            "created_at": record["created_at"],
            "updated_at": record["updated_at"],
        }

    @staticmethod
    def _payload(doc: Document) -> str:
        body = {k: v for k, v in doc.items() if k not in ("id", "created_at", "updated_at")}
        return json.dumps(body)

    async def _fetchrow(self, query: str, *args: Any) -> Record | None:
        async with self._pool.acquire() as conn:
            return await conn.fetchrow(query, *args)

    async def find_by_id(self, collection: str, doc_id: UUID) -> Document | None:
        record = await self._fetchrow(
            f"SELECT * FROM {self._table(collection)} WHERE id = $1",
            doc_id,
        )
        return self._to_document(record) if record else None

    async def find_one(self, collection: str, filters: Document) -> Document | None:
        record = await self._fetchrow(
            f"SELECT * FROM {self._table(collection)} WHERE data @> $1::jsonb LIMIT 1",
            json.dumps(filters),
        )
        return self._to_document(record) if record else None

    async def find_many(self, collection: str, filters: Document) -> list[Document]:
        async with self._pool.acquire() as conn:
            records = await conn.fetch(
                f"""
                SELECT * FROM {self._table(collection)}
                WHERE data @> $1::jsonb
                ORDER BY created_at DESC
                """,
                json.dumps(filters),
            )
        return [self._to_document(r) for r in records]

    async def insert(self, collection: str, doc: Document) -> Document:
        try:
            record = await self._fetchrow(
                f"""
                INSERT INTO {self._table(collection)} (data)
                VALUES ($1::jsonb)
                RETURNING *
                """,
                self._payload(doc),
            )
        except asyncpg.UniqueViolationError as exc:
            raise DuplicateDocumentError() from exc
        if record is None:
            raise RuntimeError(f"Failed to insert into {collection}")
        return self._to_document(record)

    async def update_by_id(
        self, collection: str, doc_id: UUID, fields: Document
    ) -> Document | None:
        record = await self._fetchrow(
            f"""
            UPDATE {self._table(collection)}
            SET data = data || $2::jsonb,
                updated_at = now()
            WHERE id = $1
            RETURNING *
            """,
            doc_id,
            self._payload(fields),
        )
        return self._to_document(record) if record else None

    async def delete_by_id(self, collection: str, doc_id: UUID) -> bool:
        async with self._pool.acquire() as conn:
            status = await conn.execute(
                f"DELETE FROM {self._table(collection)} WHERE id = $1",
                doc_id,
            )
        return status.endswith(" 1")

    async def delete_many(self, collection: str, filters: Document) -> int:
        async with self._pool.acquire() as conn:
            status = await conn.execute(
                f"DELETE FROM {self._table(collection)} WHERE data @> $1::jsonb",
                json.dumps(filters),
            )
        return int(status.split()[-1])
