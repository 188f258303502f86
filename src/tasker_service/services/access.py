"""Ownership and membership predicates.

Pure functions over already-loaded records: callers fetch the project and
task, these decide. Nothing here logs or touches the store.
"""
from __future__ import annotations

from uuid import UUID

from tasker_service.core.exceptions import AuthorizationError, NotFoundError
from tasker_service.domain.enums import AccessMode
from tasker_service.domain.models import Project, Task

# Which predicate each operation requires.
PROJECT_READ = AccessMode.OWNER
PROJECT_UPDATE = AccessMode.OWNER
PROJECT_DELETE = AccessMode.OWNER
PROJECT_INVITE = AccessMode.OWNER
TASK_LIST = AccessMode.MEMBER
TASK_READ = AccessMode.MEMBER
TASK_CREATE = AccessMode.MEMBER
TASK_UPDATE = AccessMode.MEMBER
TASK_DELETE = AccessMode.OWNER


def is_owner(user_id: UUID, project: Project) -> bool:
    return project.owner_id == user_id


def is_member(user_id: UUID, project: Project) -> bool:
    return is_owner(user_id, project) or user_id in project.collaborators


def has_project_access(user_id: UUID, project: Project, mode: AccessMode) -> bool:
    if mode is AccessMode.OWNER:
        return is_owner(user_id, project)
    return is_member(user_id, project)


def is_task_authorized(
    user_id: UUID,
    task: Task,
    project: Project | None,
    mode: AccessMode,
) -> bool:
    """Apply ``mode`` to the task's parent project.

    A missing or mismatched parent means the task is orphaned.
    """
    if project is None or project.id != task.project_id:
        raise NotFoundError("Parent project not found")
    return has_project_access(user_id, project, mode)


def require_project_access(user_id: UUID, project: Project, mode: AccessMode) -> None:
    if not has_project_access(user_id, project, mode):
        if mode is AccessMode.OWNER:
            raise AuthorizationError("Not authorized: owner only")
        raise AuthorizationError("Not authorized for this project")


def require_task_access(
    user_id: UUID,
    task: Task,
    project: Project | None,
    mode: AccessMode,
) -> None:
    if not is_task_authorized(user_id, task, project, mode):
        if mode is AccessMode.OWNER:
            raise AuthorizationError("Not authorized: owner only")
        raise AuthorizationError("Not authorized for this task")
