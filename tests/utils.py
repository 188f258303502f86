from __future__ import annotations


def make_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
