from __future__ import annotations

from fastapi import HTTPException, Request

from .users import ROLE_ORGANIZATION, ROLE_VOLUNTEER


def get_current_user(request: Request) -> dict | None:
    """Return the user dict from the session, or ``None``."""
    return request.session.get("user")


def require_user(request: Request) -> dict:
    """Raise 401 if no user is logged in."""
    user = request.session.get("user")
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_organization(request: Request) -> dict:
    """Raise 401 if not logged in, 403 if not an organization account."""
    user = require_user(request)
    if user.get("role") != ROLE_ORGANIZATION:
        raise HTTPException(status_code=403, detail="Organization access required")
    return user


def require_volunteer(request: Request) -> dict:
    """Raise 401 if not logged in, 403 if not a volunteer account."""
    user = require_user(request)
    if user.get("role") != ROLE_VOLUNTEER:
        raise HTTPException(status_code=403, detail="Only volunteers can register for events")
    return user
