# server/portfolio_cms/infrastructure/persistence/database/session.py
from __future__ import annotations

"""Engine SQLAlchemy (singleton, selon DATABASE_URL) + sessions + dépendance FastAPI."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio_cms.core.config import settings
from portfolio_cms.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def init_engine() -> Engine:
    """
    Create a singleton SQLAlchemy Engine, with dialect-aware connect_args.
    - empty DATABASE_URL: refuse to start (ConfigurationError)
    - PostgreSQL: pass connect_timeout
    - SQLite: share in-memory DB across connections (StaticPool), disable same-thread check,
      enforce foreign keys (ON DELETE SET NULL / CASCADE)
    """
    global _engine
    if _engine is not None:
        return _engine

    raw_url = (settings.DATABASE_URL or "").strip()
    if not raw_url:
        logger.error("DATABASE_URL is empty: cannot create the database engine")
        raise ConfigurationError("DATABASE_URL n'est pas configurée", code="database_url_missing")

    url = make_url(raw_url)
    backend = url.get_backend_name()  # e.g. "postgresql", "sqlite"
    kwargs: dict = dict(future=True, pool_pre_ping=True)
    connect_args: dict = {}

    if backend.startswith("postgresql") or backend == "postgres":
        # psycopg accepts connect_timeout (seconds)
        connect_args["connect_timeout"] = int(settings.DB_CONNECT_TIMEOUT)
    elif backend.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        db_name = (url.database or "").strip()
        if db_name in ("", ":memory:"):
            kwargs["poolclass"] = StaticPool

    _engine = create_engine(raw_url, connect_args=connect_args, **kwargs)

    if backend.startswith("sqlite"):
        event.listen(_engine, "connect", _sqlite_foreign_keys)

    logger.info("database engine ready (backend=%s)", backend)
    return _engine


def _sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ARG001
    dbapi_connection.execute("PRAGMA foreign_keys=ON")


def init_sessionmaker() -> sessionmaker:
    """Create (once) and return the SessionLocal factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=init_engine(),
            future=True,
            autoflush=True,
            expire_on_commit=False,
        )
    return _SessionLocal


def reset_engine() -> None:
    """Oublie engine + sessionmaker (tests, rechargement de configuration)."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


def get_session() -> Session:
    """Nouvelle Session (à fermer par l'appelant)."""
    return init_sessionmaker()()


@contextmanager
def get_sync_session() -> Iterator[Session]:
    """`with get_sync_session() as s:` (scripts, tâches hors requête)."""
    s = get_session()
    try:
        yield s
    finally:
        s.close()


def get_db() -> Iterator[Session]:
    """Dépendance FastAPI : une Session par requête, fermée en fin de requête."""
    with get_sync_session() as db:
        yield db
