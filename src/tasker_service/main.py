"""aiohttp application entrypoint."""
from __future__ import annotations

from aiohttp import web
from aiohttp_cors import ResourceOptions, setup as cors_setup

from tasker_service.api.middleware import error_middleware
from tasker_service.api.routes import projects, tasks, users
from tasker_service.db.pool import close_pool, init_pool, store_key
from tasker_service.logging_config import configure_logging
from tasker_service.repositories.store import DocumentStore
from tasker_service.settings import settings


async def healthcheck(_request: web.Request) -> web.Response:
    """Health check endpoint."""
    return web.json_response({"status": "ok", "service": settings.app_name, "env": settings.env})


def create_app(store: DocumentStore | None = None) -> web.Application:
    """Create aiohttp application.

    Without ``store`` a PostgreSQL pool is opened on startup.
    """
    app = web.Application(middlewares=[error_middleware])
    if store is not None:
        app[store_key] = store

    cors = cors_setup(
        app,
        defaults={
            origin: ResourceOptions(
                allow_credentials=True,
                expose_headers="*",
                allow_headers="*",
                allow_methods="*",
            )
            for origin in settings.cors_allowed_origins
        },
    )

    app.router.add_get("/health", healthcheck)
    app.add_routes(users.routes)
    app.add_routes(projects.routes)
    app.add_routes(tasks.routes)

    app.on_startup.append(init_pool)
    app.on_cleanup.append(close_pool)

    for route in list(app.router.routes()):
        cors.add(route)

    return app


def main() -> None:
    """Run the application."""
    configure_logging()
    web.run_app(create_app(), host=settings.host, port=settings.port, access_log=None)


if __name__ == "__main__":
    main()
