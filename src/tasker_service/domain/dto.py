"""Data Transfer Objects."""
from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

# bcrypt only hashes the first 72 bytes and rejects longer input.
MAX_PASSWORD_BYTES = 72


class UserRegisterRequest(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=6, max_length=MAX_PASSWORD_BYTES)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Reject malformed addresses but keep the address exactly as typed."""
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserLoginRequest(BaseModel):
    """User login request."""

    email: str
    password: str


class AuthResponse(BaseModel):
    """User identity plus bearer token, returned by register and login."""

    id: str
    name: str
    email: str
    token: str


class ProjectCreateRequest(BaseModel):
    """Project creation request."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=2000)


class ProjectUpdateRequest(BaseModel):
    """Project update request."""

    title: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=2000)


class InviteRequest(BaseModel):
    """Invite a collaborator by email."""

    email: str = Field(..., min_length=1)


class CollaboratorResponse(BaseModel):
    id: str
    name: str
    email: str


class TaskCreateRequest(BaseModel):
    """Task creation request."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=2000)
    # Checked by the status setter so out-of-range values map to the same error
    status: str | None = None


class TaskUpdateRequest(BaseModel):
    """Partial task update."""

    title: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=2000)
    status: str | None = None
