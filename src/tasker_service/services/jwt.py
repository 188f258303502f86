"""Bearer token helpers (HS256 JWT carrying the user id)."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from tasker_service.settings import settings


def create_access_token(user_id: str, *, ttl_sec: int | None = None) -> str:
    now = datetime.now(timezone.utc)
    ttl = settings.access_token_ttl_sec if ttl_sec is None else ttl_sec
    payload = {
        "sub": user_id,
        "type": "access",
        "iat": now,
        "exp": now + timedelta(seconds=ttl),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """Decode and verify a token; raises ValueError when invalid or expired."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise ValueError("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise ValueError("Invalid token") from exc


def get_user_id_from_token(token: str) -> str:
    payload = decode_token(token)
    if payload.get("type") != "access":
        raise ValueError("Invalid token type")
    user_id = payload.get("sub")
    if not user_id:
        raise ValueError("Token missing user ID")
    return str(user_id)
