"""Middleware for the application."""
from __future__ import annotations

from typing import Awaitable, Callable

import structlog
from aiohttp import web

from tasker_service.core.exceptions import TaskerError, handle_tasker_error

logger = structlog.get_logger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Map service errors to JSON responses."""
    try:
        return await handler(request)
    except TaskerError as e:
        if e.status_code >= 500:
            logger.error("service_error", path=request.path, error=e.message)
        return handle_tasker_error(request, e)
    except web.HTTPException:
        raise
    except Exception:
        logger.exception("unhandled_error", method=request.method, path=request.path)
        return web.json_response({"error": "Internal server error"}, status=500)
