from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from edunotes.core.logging import get_logger

logger = get_logger(__name__)


def create_store_engine(database_url: str, echo: bool = False) -> Engine:
    kwargs = {"echo": echo, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            # a single shared connection keeps the in-memory database alive
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        engine,
        expire_on_commit=False,
        autoflush=False,
    )


def init_db(engine: Engine) -> None:
    from edunotes.db.base import Base
    import edunotes.models  # noqa: F401

    Base.metadata.create_all(engine)
    logger.info("Database tables created successfully")
