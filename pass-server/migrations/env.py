"""Alembic environment for the pass store schema."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection, make_url

from portpass.core.config import Settings, get_settings
from portpass.db import models  # noqa: F401
from portpass.infrastructure.database.base import Base
from portpass.infrastructure.database.session import build_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _offline_url(settings: Settings) -> str:
    # offline SQL rendering needs a sync driver name
    url = make_url(settings.database_url)
    if url.drivername == "sqlite+aiosqlite":
        url = url.set(drivername="sqlite")
    return url.render_as_string(hide_password=False)


def _configure(**options) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **options)
    with context.begin_transaction():
        context.run_migrations()


def _apply(connection: Connection) -> None:
    # SQLite cannot ALTER most columns in place, so use batch mode there
    _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")


async def _apply_online(settings: Settings) -> None:
    engine = build_engine(settings)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_apply)
    finally:
        await engine.dispose()


settings = get_settings()
if context.is_offline_mode():
    _configure(url=_offline_url(settings), literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    asyncio.run(_apply_online(settings))
