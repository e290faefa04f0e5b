import os
import re
import tempfile
from typing import Optional
from pathlib import Path

from edunotes.core.logging import get_logger
from edunotes.db.store import KeyValueStore
from edunotes.utils.exceptions import StorageError

logger = get_logger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalFileStore(KeyValueStore):
    """Key-value store keeping one JSON file per key on the local filesystem"""

    backend = "file"

    def __init__(self, storage_root: str = "./storage"):
        super().__init__()
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info(f"Local storage initialized at: {self.storage_root}")

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.storage_root / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)

        # Write-then-rename so readers never see a half-written collection
        fd, tmp_name = tempfile.mkstemp(dir=self.storage_root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError as e:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(f"Failed to write {key} to {path}: {e}")
            raise StorageError(f"Write failed for {key}: {e}")

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        if path.exists():
            path.unlink()
            logger.info(f"Deleted stored collection: {key}")
        else:
            logger.debug(f"Nothing stored under {key}")
