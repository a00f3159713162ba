"""Alembic environment for the devconnect schema (users, profiles)."""
from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from devconnect.config import Settings
from devconnect.database import Base
import devconnect.models  # noqa: F401  (registers users/profiles on Base.metadata)

config = context.config


def database_url() -> str:
    """ALEMBIC_DATABASE_URL > DATABASE_URL > sqlalchemy.url > app default."""
    return (
        os.getenv("ALEMBIC_DATABASE_URL")
        or os.getenv("DATABASE_URL")
        or config.get_main_option("sqlalchemy.url")
        or Settings().database_url
    )


def configure_options(url: str) -> dict:
    # SQLite can't ALTER most things; batch mode rebuilds the table instead
    return {
        "target_metadata": Base.metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def migrate(url: str) -> None:
    if context.is_offline_mode():
        context.configure(url=url, literal_binds=True, **configure_options(url))
        with context.begin_transaction():
            context.run_migrations()
        return

    engine = engine_from_config(
        {"sqlalchemy.url": url},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **configure_options(url))
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


# app loggers stay enabled when alembic runs from inside the process
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

migrate(database_url())
