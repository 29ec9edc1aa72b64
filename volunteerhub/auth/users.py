from __future__ import annotations

from typing import Any

import bcrypt

ROLE_VOLUNTEER = "volunteer"
ROLE_ORGANIZATION = "organization"

# Landing page per role after login
LANDING_PATHS = {
    ROLE_ORGANIZATION: "/organization/dashboard",
    ROLE_VOLUNTEER: "/events",
}

_users: dict[str, dict[str, Any]] = {}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _seed_users() -> None:
    """Pre-seed demo accounts on import."""
    _users["volunteer"] = {
        "id": "user-1",
        "password_hash": _hash_password("volunteer123"),
        "role": ROLE_VOLUNTEER,
    }
    _users["helpinghands"] = {
        "id": "org-1",
        "password_hash": _hash_password("org123"),
        "role": ROLE_ORGANIZATION,
    }


def landing_path(role: str | None) -> str:
    return LANDING_PATHS.get(role or "", "/login")


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{id, username, role}`` or ``None``."""
    record = _users.get(username)
    if record and _verify_password(password, record["password_hash"]):
        return {"id": record["id"], "username": username, "role": record["role"]}
    return None


_seed_users()
