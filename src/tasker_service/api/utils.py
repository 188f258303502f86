"""Helper utilities for API handlers."""
from __future__ import annotations

from typing import Any, TypeVar
from uuid import UUID

import pydantic
from aiohttp import web
from pydantic import BaseModel

from tasker_service.core.exceptions import AuthenticationError, ValidationError
from tasker_service.db.pool import store_key
from tasker_service.domain.models import User
from tasker_service.repositories.projects import ProjectRepository
from tasker_service.repositories.tasks import TaskRepository
from tasker_service.repositories.users import UserRepository
from tasker_service.services.auth import AuthService
from tasker_service.services.projects import ProjectService
from tasker_service.services.tasks import TaskService

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_uuid(value: str, label: str) -> UUID:
    try:
        return UUID(value)
    except (ValueError, TypeError) as exc:
        raise ValidationError(f"Invalid {label}") from exc


async def read_json(request: web.Request) -> dict[str, Any]:
    try:
        data = await request.json()
    except ValueError as exc:
        raise ValidationError("Invalid JSON body") from exc
    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object")
    return data


async def read_model(request: web.Request, model: type[ModelT]) -> ModelT:
    data = await read_json(request)
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"Invalid request: {field}: {first['msg']}") from exc


def get_auth_service(request: web.Request) -> AuthService:
    return AuthService(UserRepository(request.app[store_key]))


def get_project_service(request: web.Request) -> ProjectService:
    store = request.app[store_key]
    return ProjectService(ProjectRepository(store), UserRepository(store), TaskRepository(store))


def get_task_service(request: web.Request) -> TaskService:
    store = request.app[store_key]
    return TaskService(TaskRepository(store), ProjectRepository(store))


async def require_current_user(request: web.Request) -> User:
    """Resolve the ``Authorization: Bearer`` header to a user."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthenticationError("Not authorized, no token")

    token = auth_header[7:].strip()  # Remove "Bearer "
    if not token:
        raise AuthenticationError("Not authorized, no token")
    return await get_auth_service(request).get_user_by_token(token)
