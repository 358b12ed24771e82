"""Candidate repository for database operations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from talent_directory_core.models.candidate import (
    CandidateFields,
    CandidateRecord,
    join_skills,
)
from talent_directory_infra.db.models import CandidateModel

_TEXT_COLUMNS: tuple[str, ...] = (
    "nombre",
    "email",
    "telefono",
    "categoria",
    "area",
    "job_title",
    "video_link",
    "reel_link",
    "portfolio_link",
    "linkedin_link",
    "experiencia",
    "educacion",
    "notas",
)


def to_record(model: CandidateModel) -> CandidateRecord:
    """Convert a stored row into a CandidateRecord with parsed skills."""
    data: dict[str, object] = {name: getattr(model, name) for name in _TEXT_COLUMNS}
    data.update(
        id=model.id,
        skills=model.skills,
        score=model.score,
        fecha_aplicacion=model.fecha_aplicacion,
    )
    return CandidateRecord.model_validate(data)


def to_model(fields: CandidateFields) -> CandidateModel:
    """Build a new row; skills go to their joined storage form."""
    model = CandidateModel(**{name: getattr(fields, name) for name in _TEXT_COLUMNS})
    model.skills = join_skills(fields.skills) or None
    model.score = fields.score
    return model


class CandidateRepository:
    """CRUD operations for candidates. Ranking and eligibility live in the engine."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session."""
        self._session = session

    async def get_by_id(self, candidate_id: int) -> CandidateRecord | None:
        """Retrieve a candidate by ID."""
        model = await self._session.get(CandidateModel, candidate_id)
        return to_record(model) if model is not None else None

    async def create(self, fields: CandidateFields) -> CandidateRecord:
        """Insert a candidate and return it with its assigned ID."""
        model = to_model(fields)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return to_record(model)

    async def list_all(self) -> list[CandidateRecord]:
        """List every candidate in insertion order."""
        stmt = select(CandidateModel).order_by(CandidateModel.id)
        result = await self._session.execute(stmt)
        return [to_record(model) for model in result.scalars().all()]
