from __future__ import annotations
"""server/portfolio_cms/migrations/env.py
~~~~~~~~~~~~~~~~~~~~~~~~
Environnement Alembic.

URL : DATABASE_URL (settings), sinon sqlalchemy.url de alembic.ini.
Une connexion déjà ouverte peut être passée via config.attributes["connection"]
(utilisé par les tests).
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine

from portfolio_cms.core.config import settings
from portfolio_cms.infrastructure.persistence.database.base import Base

config = context.config

if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _get_url() -> str:
    url = (settings.DATABASE_URL or "").strip() or config.get_main_option("sqlalchemy.url", "")
    if not url:
        raise RuntimeError("DATABASE_URL is required to run migrations")
    return url


def run_migrations_offline() -> None:
    context.configure(
        url=_get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connection = config.attributes.get("connection")
    if connection is not None:
        _run(connection)
        return

    engine = create_engine(_get_url())
    with engine.connect() as conn:
        _run(conn)
    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
