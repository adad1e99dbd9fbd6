"""SQLAlchemy engine and request-scoped sessions."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from learnhub.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base for the learnhub tables."""


_engine: Engine | None = None
_sessions: sessionmaker[Session] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across threads
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True, "pool_recycle": 1800}


def initialize_database(settings: Settings) -> Engine:
    """Create the engine and session factory if they do not exist yet."""
    global _engine, _sessions  # noqa: PLW0603

    if _engine is None:
        _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
        _sessions = sessionmaker(bind=_engine, autoflush=False)
    return _engine


def create_tables() -> None:
    """Create missing topic and content tables."""
    from learnhub import models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=initialize_database(get_settings()))


def dispose_engine() -> None:
    """Close pooled connections; the next session starts a new engine."""
    global _engine, _sessions  # noqa: PLW0603

    if _engine is not None:
        _engine.dispose()
    _engine = None
    _sessions = None


def get_db() -> Generator[Session, None, None]:
    """Yield a session for one request and close it afterwards."""
    initialize_database(get_settings())
    if _sessions is None:
        raise RuntimeError("Database session factory is not initialized")
    with _sessions() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
