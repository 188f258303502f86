"""Pydantic records for users, projects and tasks.

Records are built from store documents through :func:`parse_record`, so every
invariant-bearing field is validated once at the store boundary and surfaces
as :class:`~tasker_service.core.exceptions.ValidationError`.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, TypeVar
from uuid import UUID

import pydantic
from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator

from tasker_service.core.exceptions import ValidationError
from tasker_service.domain.enums import TaskStatus

RecordT = TypeVar("RecordT", bound=BaseModel)


def parse_record(model: type[RecordT], data: dict[str, Any]) -> RecordT:
    """Validate ``data`` into ``model`` or raise ValidationError."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or model.__name__
        raise ValidationError(f"{field}: {first['msg']}") from exc


def _required_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


RequiredText = Annotated[str, AfterValidator(_required_text)]


class UserData(BaseModel):
    name: str
    email: str
    hashed_password: str
    is_admin: bool = False


class User(UserData):
    id: UUID
    created_at: datetime
    updated_at: datetime

    def to_public(self) -> dict[str, Any]:
        """Serializable view without the password hash."""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "is_admin": self.is_admin,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class ProjectData(BaseModel):
    title: RequiredText
    description: str = ""
    owner_id: UUID
    collaborators: list[UUID] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value: str | None) -> str:
        return (value or "").strip()

    @model_validator(mode="after")
    def check_membership(self) -> "ProjectData":
        if len(set(self.collaborators)) != len(self.collaborators):
            raise ValueError("collaborators must not contain duplicates")
        if self.owner_id in self.collaborators:
            raise ValueError("owner cannot be listed as a collaborator")
        return self


class Project(ProjectData):
    id: UUID
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "owner_id": str(self.owner_id),
            "collaborators": [str(user_id) for user_id in self.collaborators],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class TaskData(BaseModel):
    title: RequiredText
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    project_id: UUID

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, value: str | None) -> str:
        return (value or "").strip()


class Task(TaskData):
    id: UUID
    created_at: datetime
    updated_at: datetime

    def set_status(self, value: TaskStatus | str) -> TaskStatus:
        """Assign a status; any of the three values may follow any other."""
        self.status = coerce_status(value)
        return self.status

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "project_id": str(self.project_id),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


def coerce_status(value: TaskStatus | str) -> TaskStatus:
    """Map a raw status label onto TaskStatus, rejecting anything else."""
    if isinstance(value, TaskStatus):
        return value
    try:
        return TaskStatus(value)
    except ValueError as exc:
        allowed = ", ".join(status.value for status in TaskStatus)
        raise ValidationError(f"Status must be one of {allowed}") from exc
