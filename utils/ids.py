import secrets
from datetime import datetime, timezone

# URL-safe alphabet, 21 chars gives roughly the collision space of a UUIDv4
ID_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
ID_SIZE = 21


def new_id(size: int = ID_SIZE) -> str:
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def utc_now_iso() -> str:
    """Current UTC time like 2024-05-01T12:30:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
