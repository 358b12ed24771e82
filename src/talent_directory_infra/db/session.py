"""Candidate store lifecycle: engine, sessions and table creation.

Every CLI command opens the store with :func:`session_scope`, which builds an
engine for the configured backend, makes sure the ``candidatos`` table exists,
hands out one session and always disposes the engine afterwards.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from talent_directory_core.config.settings import Settings
from talent_directory_infra.db.models import Base

# SQLite connections are shared across the event loop's worker thread.
_SQLITE_OPTIONS: dict[str, object] = {"connect_args": {"check_same_thread": False}}
_POSTGRES_OPTIONS: dict[str, object] = {"pool_size": 5, "max_overflow": 10}


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine for ``settings.db_backend``."""
    options = _SQLITE_OPTIONS if settings.db_backend == "sqlite" else _POSTGRES_OPTIONS
    return create_async_engine(settings.database_url, echo=False, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """Create the candidate table and its indexes if missing."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope(settings: Settings) -> AsyncIterator[AsyncSession]:
    """Open the candidate store, yield one session, then dispose the engine.

    The caller commits; anything uncommitted is rolled back when the session
    closes.
    """
    engine = create_engine(settings)
    try:
        await init_db(engine)
        async with create_session_factory(engine)() as session:
            yield session
    finally:
        await engine.dispose()
