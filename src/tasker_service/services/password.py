"""bcrypt password credentials."""
from __future__ import annotations

import bcrypt

from tasker_service.core.exceptions import ValidationError
from tasker_service.settings import settings

BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password; input longer than bcrypt accepts is a ValidationError."""
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=settings.bcrypt_rounds)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash.

    Overlong input and malformed hashes never match.
    """
    raw = password.encode("utf-8")
    if len(raw) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, hashed_password.encode("utf-8"))
    except ValueError:
        return False
