from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from tasker_service.core.exceptions import AuthorizationError, NotFoundError
from tasker_service.domain.enums import AccessMode
from tasker_service.domain.models import Project, Task
from tasker_service.services import access

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)

OWNER = uuid.uuid4()
COLLAB = uuid.uuid4()
STRANGER = uuid.uuid4()


def make_project(**overrides) -> Project:
    data = {
        "id": uuid.uuid4(),
        "title": "Launch",
        "owner_id": OWNER,
        "collaborators": [COLLAB],
        "created_at": NOW,
        "updated_at": NOW,
    }
    data.update(overrides)
    return Project.model_validate(data)


def make_task(project: Project) -> Task:
    return Task.model_validate(
        {
            "id": uuid.uuid4(),
            "title": "Write copy",
            "project_id": project.id,
            "created_at": NOW,
            "updated_at": NOW,
        }
    )


def test_is_owner_only_for_owner():
    project = make_project()
    assert access.is_owner(OWNER, project)
    assert not access.is_owner(COLLAB, project)
    assert not access.is_owner(STRANGER, project)


def test_is_member_covers_owner_and_collaborators():
    project = make_project()
    assert access.is_member(OWNER, project)
    assert access.is_member(COLLAB, project)
    assert not access.is_member(STRANGER, project)


def test_is_member_with_no_collaborators():
    project = make_project(collaborators=[])
    assert access.is_member(OWNER, project)
    assert not access.is_member(COLLAB, project)


@pytest.mark.parametrize(
    ("user_id", "mode", "expected"),
    [
        (OWNER, AccessMode.OWNER, True),
        (OWNER, AccessMode.MEMBER, True),
        (COLLAB, AccessMode.OWNER, False),
        (COLLAB, AccessMode.MEMBER, True),
        (STRANGER, AccessMode.MEMBER, False),
    ],
)
def test_is_task_authorized_uses_parent_project(user_id, mode, expected):
    project = make_project()
    task = make_task(project)
    assert access.is_task_authorized(user_id, task, project, mode) is expected


def test_task_without_parent_is_not_found():
    project = make_project()
    task = make_task(project)
    with pytest.raises(NotFoundError):
        access.is_task_authorized(OWNER, task, None, AccessMode.MEMBER)
    with pytest.raises(NotFoundError):
        access.is_task_authorized(OWNER, task, make_project(), AccessMode.MEMBER)


def test_require_project_access_raises_for_collaborator_on_owner_operation():
    project = make_project()
    access.require_project_access(OWNER, project, access.PROJECT_DELETE)
    with pytest.raises(AuthorizationError):
        access.require_project_access(COLLAB, project, access.PROJECT_DELETE)


def test_task_policy():
    project = make_project()
    task = make_task(project)
    for mode in (access.TASK_READ, access.TASK_CREATE, access.TASK_UPDATE, access.TASK_LIST):
        access.require_task_access(COLLAB, task, project, mode)
    with pytest.raises(AuthorizationError):
        access.require_task_access(COLLAB, task, project, access.TASK_DELETE)
    with pytest.raises(AuthorizationError):
        access.require_task_access(STRANGER, task, project, access.TASK_READ)
