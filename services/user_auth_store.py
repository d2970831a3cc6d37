# services/user_auth_store.py
import logging

from services.password_hasher import hash_password, verify_password
from services.store import Store
from utils.exceptions import AuthError, InputError
from utils.ids import new_id, utc_now_iso

logger = logging.getLogger(__name__)


def find_user_by_email(state: dict, email: str) -> dict | None:
    for u in state["users"]:
        if u.get("email") == email:
            return u
    return None


def find_user_by_id(state: dict, user_id: str) -> dict | None:
    for u in state["users"]:
        if u.get("id") == user_id:
            return u
    return None


def create_user(store: Store, name: str, roll: str, email: str, password: str) -> dict:
    """Register a new user and return the stored record."""
    with store.transaction() as state:
        if find_user_by_email(state, email):
            raise InputError("Email already registered")

        user = {
            "id": new_id(),
            "name": name,
            "roll": roll,
            "email": email,
            "passwordHash": hash_password(password),
            "createdAt": utc_now_iso(),
        }
        state["users"].append(user)

    logger.info("Registered user %s (%s)", user["id"], email)
    return user


def check_credentials(store: Store, email: str, password: str) -> dict:
    user = find_user_by_email(store.read(), email) if email else None
    if not user or not verify_password(password, user.get("passwordHash", "")):
        logger.info("Failed login for %s", email)
        raise AuthError()
    return user
