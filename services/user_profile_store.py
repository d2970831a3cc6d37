# services/user_profile_store.py
from services.store import Store
from services.user_auth_store import find_user_by_id
from utils.exceptions import InputError
from utils.ids import utc_now_iso

OPTIONAL_FIELDS = ("category", "rate", "mode", "availability", "bio")


def save_profile(store: Store, user_id: str, role, skills, extra: dict | None = None) -> dict:
    """Insert or replace the profile for ``user_id``. Fields are never merged."""
    extra = extra or {}
    with store.transaction() as state:
        if not find_user_by_id(state, user_id):
            raise InputError("User not found")

        profile = {"userId": user_id, "role": role, "skills": skills}
        for key in OPTIONAL_FIELDS:
            if key in extra:
                profile[key] = extra[key]
        profile["updatedAt"] = utc_now_iso()

        profiles = state["profiles"]
        for i, p in enumerate(profiles):
            if p.get("userId") == user_id:
                profiles[i] = profile
                break
        else:
            profiles.append(profile)

    return profile

