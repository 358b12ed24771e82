"""Integration test fixtures: a real SQLite database on disk."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from talent_directory_core.config.settings import Settings
from talent_directory_infra.db.session import create_engine, create_session_factory, init_db
from tests.mocks.mock_settings import make_real_settings


@pytest.fixture
def real_settings(tmp_path: Path) -> Settings:
    """Real Settings pointing at a SQLite file under tmp_path."""
    return make_real_settings(tmp_path)


@pytest.fixture
async def db_engine(real_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Engine with tables created; disposed after the test."""
    engine = create_engine(real_settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return create_session_factory(db_engine)
