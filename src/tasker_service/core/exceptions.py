"""Custom exceptions."""
from __future__ import annotations

from aiohttp import web


class TaskerError(Exception):
    """Base service error."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class AuthenticationError(TaskerError):
    """Credential missing, invalid or expired."""

    status_code = 401
    message = "Not authorized"


class AuthorizationError(TaskerError):
    """Authenticated but not permitted on this resource."""

    status_code = 403
    message = "Access forbidden"


class NotFoundError(TaskerError):
    """Resource not found."""

    status_code = 404
    message = "Resource not found"


class ValidationError(TaskerError):
    """Malformed input."""

    status_code = 400
    message = "Invalid request"


class InvalidOperationError(TaskerError):
    """Request is well-formed but not allowed on the current resource state."""

    status_code = 400
    message = "Invalid operation"


class DuplicateDocumentError(InvalidOperationError):
    """A unique index rejected the write."""

    message = "Duplicate document"


class UserAlreadyExistsError(InvalidOperationError):
    """User already exists."""

    status_code = 409
    message = "User already exists"


def handle_tasker_error(request: web.Request, error: TaskerError) -> web.Response:
    """Render a service error as JSON."""
    return web.json_response(
        {"error": error.message},
        status=error.status_code,
    )
