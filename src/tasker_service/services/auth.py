"""Authentication service."""
from __future__ import annotations

from uuid import UUID

import structlog

from tasker_service.core.exceptions import (
    AuthenticationError,
    DuplicateDocumentError,
    UserAlreadyExistsError,
)
from tasker_service.domain.models import User
from tasker_service.repositories.users import UserRepository
from tasker_service.services.jwt import create_access_token, get_user_id_from_token
from tasker_service.services.password import hash_password, verify_password

logger = structlog.get_logger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def register(self, name: str, email: str, password: str) -> tuple[User, str]:
        """Register a new user and issue an access token."""
        if await self._user_repo.email_exists(email):
            raise UserAlreadyExistsError()

        hashed = hash_password(password)
        try:
            user = await self._user_repo.create(name, email, hashed)
        except DuplicateDocumentError as exc:
            # Lost a race with a concurrent registration for the same email
            raise UserAlreadyExistsError() from exc
        logger.info("user_registered", user_id=str(user.id))
        return user, create_access_token(str(user.id))

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Authenticate user and return a token."""
        user = await self._user_repo.get_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            logger.info("login_failed")
            raise AuthenticationError("Invalid email or password")

        return user, create_access_token(str(user.id))

    async def get_user_by_token(self, access_token: str) -> User:
        """Resolve a bearer token to its user."""
        try:
            user_id = UUID(get_user_id_from_token(access_token))
        except ValueError as e:
            raise AuthenticationError("Not authorized, token failed") from e

        user = await self._user_repo.find(user_id)
        if not user:
            raise AuthenticationError("Not authorized, token failed")

        return user
