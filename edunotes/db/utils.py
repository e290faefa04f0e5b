import json
from contextlib import contextmanager
from typing import Generic, Iterator, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from edunotes.core.logging import get_logger, get_performance_logger
from edunotes.db.store import KeyValueStore
from edunotes.utils.exceptions import CorruptCollectionError

logger = get_logger(__name__)
perf_logger = get_performance_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)

SCHEMA_VERSION = 1


class BaseRepository(Generic[ModelType]):
    """One typed collection stored as a whole under a single key.

    Collections are written as ``{"schema_version": N, "items": [...]}``.
    A bare JSON list is the older unversioned layout and is read as
    version 0; the next write upgrades it.
    """

    collection_key: str = ""

    def __init__(self, store: KeyValueStore, model: Type[ModelType]):
        if not self.collection_key:
            raise TypeError(f"{type(self).__name__} must define collection_key")
        self.store = store
        self.model = model
        self._adapter = TypeAdapter(List[model])

    def exists(self) -> bool:
        """Whether anything is stored under this collection's key"""
        return self.store.get(self.collection_key) is not None

    def list_all(self) -> List[ModelType]:
        """Full collection in stored order"""
        with self.store.lock(self.collection_key):
            return self._load()

    def _decode(self, raw: str) -> List[ModelType]:
        key = self.collection_key
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptCollectionError(key, f"invalid JSON: {e}")

        if isinstance(payload, list):
            version, items = 0, payload
        elif isinstance(payload, dict) and isinstance(payload.get("items"), list):
            version, items = payload.get("schema_version"), payload["items"]
        else:
            raise CorruptCollectionError(key, "expected a list of records")

        if not isinstance(version, int) or isinstance(version, bool) or version > SCHEMA_VERSION:
            raise CorruptCollectionError(key, f"unsupported schema version {version!r}")

        try:
            return self._adapter.validate_python(items)
        except PydanticValidationError as e:
            raise CorruptCollectionError(key, f"{e.error_count()} invalid field(s): {e.errors()[0]['msg']}")

    def _encode(self, items: List[ModelType]) -> str:
        records = self._adapter.dump_python(items, mode="json", by_alias=True, exclude_none=True)
        return json.dumps({"schema_version": SCHEMA_VERSION, "items": records})

    def _load(self) -> List[ModelType]:
        with perf_logger.measure_time("load", collection=self.collection_key):
            raw = self.store.get(self.collection_key)
            if raw is None:
                return []
            return self._decode(raw)

    def _save(self, items: List[ModelType]) -> None:
        with perf_logger.measure_time("save", collection=self.collection_key):
            self.store.set(self.collection_key, self._encode(items))

    @contextmanager
    def _mutate(self) -> Iterator[List[ModelType]]:
        """Read-modify-write the whole collection under the collection lock.

        The list handed out may be changed in place or have its contents
        replaced; it is written back only if the block exits cleanly.
        """
        with self.store.lock(self.collection_key):
            items = self._load()
            yield items
            self._save(items)

    def _seed_if_absent(self, seed: List[ModelType]) -> bool:
        """Write ``seed`` only when the key has never been stored"""
        with self.store.lock(self.collection_key):
            if self.store.get(self.collection_key) is not None:
                return False
            self._save(list(seed))
            logger.info(f"Seeded {self.collection_key} with {len(seed)} record(s)")
            return True
