"""Collaborator invitation rule.

The caller must already have checked that the inviter owns the project.
"""
from __future__ import annotations

from tasker_service.core.exceptions import InvalidOperationError, NotFoundError
from tasker_service.domain.models import Project, User
from tasker_service.repositories.projects import ProjectRepository
from tasker_service.repositories.users import UserRepository


async def invite_collaborator(
    project: Project,
    candidate_email: str,
    *,
    users: UserRepository,
    projects: ProjectRepository,
) -> tuple[Project, User]:
    """Add the user registered under ``candidate_email`` to the project.

    Repeating an invite fails with InvalidOperationError rather than
    succeeding silently; the project is untouched on every failure.
    """
    candidate = await users.get_by_email(candidate_email)
    if candidate is None:
        raise NotFoundError("User not found")

    if candidate.id == project.owner_id:
        raise InvalidOperationError("Owner is already a member")

    if candidate.id in project.collaborators:
        raise InvalidOperationError("User is already a collaborator")

    updated = await projects.set_collaborators(project, [*project.collaborators, candidate.id])
    return updated, candidate
