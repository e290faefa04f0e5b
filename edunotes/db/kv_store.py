from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError

from edunotes.core.logging import get_logger
from edunotes.db.session import create_store_engine, create_session_factory, init_db
from edunotes.db.store import KeyValueStore
from edunotes.models.kv_entry import KeyValueEntry
from edunotes.utils.exceptions import StorageError

logger = get_logger(__name__)


class SQLKeyValueStore(KeyValueStore):
    """Key-value store backed by a single SQL table, one row per key"""

    backend = "sql"

    def __init__(self, database_url: str, echo: bool = False):
        super().__init__()
        self.engine = create_store_engine(database_url, echo=echo)
        init_db(self.engine)
        self.session_factory = create_session_factory(self.engine)
        logger.info(f"SQL storage initialized at: {self.engine.url.render_as_string(hide_password=True)}")

    def get(self, key: str) -> Optional[str]:
        try:
            with self.session_factory() as session:
                return session.scalar(select(KeyValueEntry.value).where(KeyValueEntry.key == key))
        except SQLAlchemyError as e:
            logger.error(f"Error reading {key}: {e}")
            raise StorageError(f"Failed to read {key}")

    def set(self, key: str, value: str) -> None:
        try:
            with self.session_factory.begin() as session:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    session.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
        except SQLAlchemyError as e:
            logger.error(f"Error writing {key}: {e}")
            raise StorageError(f"Failed to write {key}")

    def delete(self, key: str) -> None:
        try:
            with self.session_factory.begin() as session:
                session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {key}: {e}")
            raise StorageError(f"Failed to delete {key}")

    def close(self) -> None:
        self.engine.dispose()
        logger.info("SQL storage closed")
