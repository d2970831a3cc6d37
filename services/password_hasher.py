# services/password_hasher.py
import bcrypt

from config.settings import BCRYPT_ROUNDS

# bcrypt only considers the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(password) -> bytes:
    return str(password).encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Return True if ``password`` matches the stored bcrypt hash."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except ValueError:
        return False
