"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from portpass.core.config import Settings
from portpass.infrastructure.database.base import Base


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {
        "echo": settings.database.echo or settings.debug,
    }
    if settings.database.pool_size is not None:
        engine_kwargs["pool_size"] = settings.database.pool_size
    if settings.database.max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.database.max_overflow

    engine = create_async_engine(settings.database_url, **engine_kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create database tables in development mode (migrations preferred)."""
    # imported for its side effect of registering the models on Base.metadata
    from portpass.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
