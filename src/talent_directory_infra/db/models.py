"""SQLAlchemy ORM table models."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class CandidateModel(Base):
    """Candidate table. Skills are stored as one comma-delimited string."""

    __tablename__ = "candidatos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    telefono: Mapped[str | None] = mapped_column(String(50), nullable=True)
    categoria: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    area: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    skills: Mapped[str | None] = mapped_column(Text, nullable=True)
    video_link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    reel_link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    portfolio_link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    linkedin_link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    experiencia: Mapped[str | None] = mapped_column(Text, nullable=True)
    educacion: Mapped[str | None] = mapped_column(Text, nullable=True)
    notas: Mapped[str | None] = mapped_column(Text, nullable=True)
    score: Mapped[float | None] = mapped_column(Float, nullable=True)
    fecha_aplicacion: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(UTC)
    )
