"""Database engine, session factory and FastAPI session dependency."""

from __future__ import annotations

import logging
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import get_settings

from ..models import Base
from ..obs import add_query_logger

logger = logging.getLogger("kitchenpos.db")


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Return an engine for ``url`` with query timing attached.

    SQLite URLs get ``check_same_thread=False`` because FastAPI runs sync
    endpoints in a thread pool; in-memory SQLite additionally shares a single
    connection so every session sees the same data.
    """

    kwargs: dict = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in {"sqlite://", "sqlite:///:memory:"}:
            kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    add_query_logger(engine)
    return engine


def create_test_session() -> tuple[sessionmaker, Engine]:
    """Return a session factory and engine for tests.

    The database uses an in-memory SQLite engine with a static pool so that
    multiple connections share the same data, with the schema already created.
    """

    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    return session_factory, engine


_settings = get_settings()
engine: Engine = create_db_engine(_settings.database_url, echo=_settings.sql_echo)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(bind: Engine | None = None) -> None:
    """Create all tables on ``bind`` (the application engine by default)."""

    target = bind or engine
    logger.info("creating schema on %s", target.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=target)


def get_session() -> Iterator[Session]:
    """FastAPI dependency yielding one session per request."""

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


__all__ = [
    "SessionLocal",
    "create_db_engine",
    "create_test_session",
    "engine",
    "get_session",
    "init_db",
]
