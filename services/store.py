# services/store.py
import copy
import json
import logging
import os
import threading
from contextlib import contextmanager

from utils.exceptions import StoreError

logger = logging.getLogger(__name__)


def empty_state() -> dict:
    return {"users": [], "profiles": []}


def _normalize(data) -> dict:
    if not isinstance(data, dict):
        raise StoreError("Datastore root must be a JSON object")
    for key in ("users", "profiles"):
        if not isinstance(data.setdefault(key, []), list):
            raise StoreError(f"Datastore '{key}' must be a list")
    return data


class Store:
    """Whole-document storage for users and profiles.

    Subclasses implement ``load`` and ``save``. Mutations should go through
    ``transaction()`` so concurrent requests cannot drop each other's writes.
    """

    def __init__(self):
        self._lock = threading.RLock()

    def load(self) -> dict:
        raise NotImplementedError

    def save(self, state: dict) -> None:
        raise NotImplementedError

    def read(self) -> dict:
        with self._lock:
            return self.load()

    @contextmanager
    def transaction(self):
        """Load the state, yield it for mutation, save it if no error was raised."""
        with self._lock:
            state = self.load()
            yield state
            self.save(state)


class JsonFileStore(Store):
    def __init__(self, path: str):
        super().__init__()
        self.path = path

    def load(self) -> dict:
        if not os.path.exists(self.path):
            logger.warning("Datastore %s not found, initializing empty store", self.path)
            state = empty_state()
            self.save(state)
            return state

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Could not read datastore {self.path}") from e

        if not raw.strip():
            return empty_state()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreError(f"Datastore {self.path} is not valid JSON") from e
        return _normalize(data)

    def save(self, state: dict) -> None:
        """Persist the full state, replacing the file in one step."""
        directory = os.path.dirname(self.path)
        tmp = self.path + ".tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(state, f, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            raise StoreError(f"Could not write datastore {self.path}") from e


class MemoryStore(Store):
    def __init__(self, state: dict | None = None):
        super().__init__()
        self._state = _normalize(copy.deepcopy(state)) if state is not None else empty_state()

    def load(self) -> dict:
        return copy.deepcopy(self._state)

    def save(self, state: dict) -> None:
        self._state = copy.deepcopy(state)
