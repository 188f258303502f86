"""User repository."""
from __future__ import annotations

from tasker_service.domain.models import User, UserData
from tasker_service.repositories.base import BaseRepository
from tasker_service.repositories.store import USERS


class UserRepository(BaseRepository[UserData, User]):
    """Repository for user operations."""

    collection = USERS
    data_model = UserData
    record_model = User
    not_found_message = "User not found"

    async def create(
        self,
        name: str,
        email: str,
        hashed_password: str,
        is_admin: bool = False,
    ) -> User:
        """Create a new user."""
        return await self._insert(
            {
                "name": name,
                "email": email,
                "hashed_password": hashed_password,
                "is_admin": is_admin,
            }
        )

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email (exact match)."""
        doc = await self._store.find_one(self.collection, {"email": email})
        return self._to_model(doc) if doc else None

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None
