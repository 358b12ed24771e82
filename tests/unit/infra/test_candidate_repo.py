"""Tests for the candidate repository using SQLite."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import UTC, datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from talent_directory_core.interfaces import CandidateSource
from talent_directory_infra.db.models import Base, CandidateModel
from talent_directory_infra.db.repositories.candidate_repo import (
    CandidateRepository,
    to_model,
    to_record,
)
from talent_directory_infra.db.session import create_session_factory
from tests.mocks.mock_factories import make_candidate_fields


@pytest.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Create an in-memory SQLite session for testing."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = create_session_factory(engine)
    async with factory() as sess:
        yield sess
    await engine.dispose()


@pytest.mark.unit
class TestConversion:
    """Test row <-> record conversion."""

    def test_to_model_joins_skills(self) -> None:
        """Skills are stored in their joined form."""
        model = to_model(make_candidate_fields(skills=["After Effects", " Illustrator "]))
        assert model.skills == "After Effects, Illustrator"
        assert model.score == 8.8

    def test_to_model_empty_skills_is_null(self) -> None:
        """No skills are stored as NULL."""
        assert to_model(make_candidate_fields(skills=[])).skills is None

    def test_to_record_parses_skills(self) -> None:
        """Stored skills come back parsed."""
        model = CandidateModel(
            id=4,
            nombre="Ana",
            skills="Premiere,  DaVinci",
            score=None,
            fecha_aplicacion=datetime(2024, 3, 1),
        )
        record = to_record(model)
        assert record.skills == ["Premiere", "DaVinci"]
        assert record.fecha_aplicacion.tzinfo is UTC


@pytest.mark.unit
class TestCandidateRepository:
    """Test CandidateRepository CRUD operations."""

    async def test_satisfies_candidate_source(self, session: AsyncSession) -> None:
        """The repository implements the CandidateSource protocol."""
        assert isinstance(CandidateRepository(session), CandidateSource)

    async def test_create_and_get(self, session: AsyncSession) -> None:
        """Create a candidate and retrieve it by ID."""
        repo = CandidateRepository(session)
        created = await repo.create(make_candidate_fields(nombre="Juan"))
        assert created.id is not None

        fetched = await repo.get_by_id(created.id)
        assert fetched is not None
        assert fetched.nombre == "Juan"
        assert fetched.skills == ["After Effects", "Illustrator"]

    async def test_get_missing_returns_none(self, session: AsyncSession) -> None:
        """Unknown ids return None."""
        assert await CandidateRepository(session).get_by_id(404) is None

    async def test_ids_are_distinct(self, session: AsyncSession) -> None:
        """Each created candidate gets its own id."""
        repo = CandidateRepository(session)
        first = await repo.create(make_candidate_fields(nombre="Uno"))
        second = await repo.create(make_candidate_fields(nombre="Dos"))
        assert first.id != second.id

    async def test_list_all_in_insertion_order(self, session: AsyncSession) -> None:
        """list_all returns every row, including ineligible scores."""
        repo = CandidateRepository(session)
        for nombre, score in (("Uno", 5.0), ("Dos", 15.0), ("Tres", None)):
            await repo.create(make_candidate_fields(nombre=nombre, score=score))
        records = await repo.list_all()
        assert [r.nombre for r in records] == ["Uno", "Dos", "Tres"]
        assert [r.score for r in records] == [5.0, 15.0, None]
