import threading
from typing import Optional, Dict

from sqlalchemy.exc import SQLAlchemyError

from edunotes.core.config import Settings
from edunotes.core.logging import get_logger

logger = get_logger(__name__)


class KeyValueStore:
    """Whole-collection key-value storage

    Values are opaque text. Every store hands out one re-entrant lock per key
    so repositories sharing a store serialize their read-modify-write cycles.
    """

    backend = "abstract"
    available = True

    def __init__(self):
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def lock(self, key: str) -> threading.RLock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.RLock()
            return lock


class MemoryStore(KeyValueStore):
    """Process-local store, mostly for tests"""

    backend = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        super().__init__()
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)


class UnavailableStore(KeyValueStore):
    """Stand-in used when no persistent storage exists

    Reads come back empty and writes are dropped. Nothing here raises.
    """

    backend = "none"
    available = False

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str) -> None:
        logger.debug(f"Storage unavailable, dropping write to {key}")

    def delete(self, key: str) -> None:
        logger.debug(f"Storage unavailable, ignoring delete of {key}")


def open_store(config: Settings) -> KeyValueStore:
    """Open the store selected by STORAGE_BACKEND, degrading to UnavailableStore"""
    backend = config.STORAGE_BACKEND

    if backend == "none":
        logger.info("Persistent storage disabled")
        return UnavailableStore()

    if backend == "memory":
        return MemoryStore()

    try:
        if backend == "file":
            from edunotes.services.local_storage import LocalFileStore
            return LocalFileStore(config.LOCAL_STORAGE_ROOT)

        from edunotes.db.kv_store import SQLKeyValueStore
        return SQLKeyValueStore(config.DATABASE_URL, echo=config.DEBUG)

    except (OSError, SQLAlchemyError) as e:
        logger.warning(f"Storage backend '{backend}' unavailable: {e}")
        logger.info("Continuing without persistent storage")
        return UnavailableStore()
