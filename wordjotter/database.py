"""Database engine and request-scoped sessions.

The notebook is personal, so the default store is a local SQLite file. Other
SQLAlchemy URLs (e.g. PostgreSQL for a hosted instance) work unchanged.
"""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from wordjotter.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _is_in_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def _enable_sqlite_wal(dbapi_connection: Any, connection_record: Any) -> None:
    # WAL lets the review page read while a save is being written
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """Create an engine suited to the configured backend."""
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True, pool_recycle=3600)

    # Sync endpoints run in a threadpool, so connections cross threads
    connect_args = {"check_same_thread": False}
    if _is_in_memory_sqlite(url):
        # One shared connection, otherwise every checkout sees an empty database
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)

    engine = create_engine(url, connect_args=connect_args)
    event.listen(engine, "connect", _enable_sqlite_wal)
    return engine


def initialize_database(settings: Settings) -> Engine:
    """Create the engine, the session factory and any missing tables."""
    global _engine, _session_factory  # noqa: PLW0603

    # Register models on Base.metadata
    from wordjotter import models  # noqa: F401

    _engine = build_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    Base.metadata.create_all(bind=_engine)
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Return the session factory, initializing the database on first use."""
    if _session_factory is None:
        initialize_database(get_settings())
    assert _session_factory is not None, "Database initialization did not set a session factory"
    return _session_factory


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Yield a session that lives for one request."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


DatabaseSession = Annotated[Session, Depends(get_db)]
