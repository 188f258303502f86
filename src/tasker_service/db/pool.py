"""Asyncpg connection pool helpers."""
from __future__ import annotations

import asyncpg  # type: ignore[import-untyped]
from aiohttp import web

from tasker_service.repositories.postgres import PostgresDocumentStore
from tasker_service.repositories.store import DocumentStore
from tasker_service.settings import settings

pool_key = web.AppKey("db_pool", asyncpg.Pool)
store_key = web.AppKey("document_store", DocumentStore)


async def init_pool(app: web.Application) -> None:
    """Create the pool and the Postgres-backed store unless a store was injected."""
    if store_key in app:
        return
    pool = await asyncpg.create_pool(
        dsn=str(settings.database_url),
        max_size=settings.db_pool_size,
    )
    app[pool_key] = pool
    app[store_key] = PostgresDocumentStore(pool)


async def close_pool(app: web.Application) -> None:
    """Close pool on shutdown."""
    pool = app.get(pool_key)
    if pool is not None:
        await pool.close()
