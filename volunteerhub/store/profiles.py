from __future__ import annotations

from ..auth.users import ROLE_ORGANIZATION, ROLE_VOLUNTEER
from ..recommendations.models import Profile, ProfileUpdate
from .errors import ProfileFieldError

# Fields each account type may edit on its own profile
EDITABLE_FIELDS = {
    ROLE_VOLUNTEER: {"full_name", "phone", "bio", "profile_image_url"},
    ROLE_ORGANIZATION: {
        "organization_name",
        "organization_description",
        "organization_website",
        "phone",
        "location",
        "profile_image_url",
    },
}


class ProfileStore:
    """Per-user profile records, created empty on first read."""

    def __init__(self) -> None:
        self._profiles: dict[str, Profile] = {}

    def get(self, user_id: str, role: str) -> Profile:
        return self._profiles.get(user_id) or Profile(id=user_id, role=role)

    def update(self, user_id: str, role: str, changes: ProfileUpdate) -> Profile:
        data = changes.model_dump(exclude_unset=True)
        rejected = sorted(set(data) - EDITABLE_FIELDS.get(role, set()))
        if rejected:
            raise ProfileFieldError(role, rejected)
        profile = self.get(user_id, role).model_copy(update=data)
        self._profiles[user_id] = profile
        return profile

    def clear(self) -> None:
        self._profiles.clear()
