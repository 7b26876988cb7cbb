"""Database engine and session management for the SQL record store."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from memoize.config import Settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Set by initialize_database() in the application lifespan
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory for DATABASE_URL."""
    global _engine, _session_factory  # noqa: PLW0603

    if settings.DATABASE_URL.startswith("sqlite"):
        # One shared connection, so in-memory databases survive across sessions
        _engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        _engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def create_tables() -> None:
    """Create any missing tables on the initialized engine."""
    # Register models on Base.metadata
    import memoize.models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=get_engine())


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def get_db() -> Generator[Session, None, None]:
    """Yield a session for one request."""
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    db = _session_factory()
    try:
        yield db
    finally:
        db.close()


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
