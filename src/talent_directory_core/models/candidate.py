"""Candidate record models and the skills storage codec."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from datetime import UTC, datetime
from decimal import Decimal
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from talent_directory_core.constants import SKILLS_DELIMITER, SKILLS_JOINER


class ScoreBand(IntEnum):
    """Whether a record carries a usable score. Unscored ranks below any score."""

    UNSCORED = 0
    SCORED = 1


def parse_skills(value: object) -> list[str]:
    """Normalize skills from the delimited storage form or a sequence.

    Tokens are trimmed and empty tokens dropped, so
    ``parse_skills(join_skills(tokens))`` returns the trimmed tokens.
    """
    if value is None:
        return []
    if isinstance(value, str):
        raw: Iterable[object] = value.split(SKILLS_DELIMITER)
    elif isinstance(value, Iterable):
        raw = value
    else:
        raw = [value]
    tokens = (str(token).strip() for token in raw if token is not None)
    return [token for token in tokens if token]


def join_skills(tokens: Iterable[str]) -> str:
    """Join skill tokens into the canonical delimited storage string."""
    return SKILLS_JOINER.join(token.strip() for token in tokens if token.strip())


def parse_score(value: object) -> float | None:
    """Coerce a raw score to a finite float, or None when absent or malformed.

    Any real number (int, float, Decimal, ...) is accepted; numeric text
    accepts a decimal comma ("8,5").
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real | Decimal):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", ".", 1)
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


class CandidateFields(BaseModel):
    """Candidate data as supplied at creation time (no storage identity yet)."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    nombre: str = Field(min_length=1, description="Full name")
    email: str | None = Field(default=None, description="Contact email")
    telefono: str | None = Field(default=None, description="Phone number")
    categoria: str | None = Field(default=None, description="Declared category")
    area: str | None = Field(default=None, description="Professional area")
    job_title: str | None = Field(default=None, alias="jobTitle", description="Job title")
    skills: list[str] = Field(default_factory=list, description="Parsed skill tokens")
    video_link: str | None = Field(default=None, alias="videoLink", description="Video URL")
    reel_link: str | None = Field(default=None, alias="reelLink", description="Reel URL")
    portfolio_link: str | None = Field(
        default=None, alias="portfolioLink", description="Portfolio URL"
    )
    linkedin_link: str | None = Field(
        default=None, alias="linkedinLink", description="LinkedIn profile URL"
    )
    experiencia: str | None = Field(default=None, description="Experience summary")
    educacion: str | None = Field(default=None, description="Education summary")
    notas: str | None = Field(default=None, description="Recruiter notes")
    score: float | None = Field(default=None, description="Recruiter score, 0-10")

    @field_validator("nombre", mode="before")
    @classmethod
    def strip_nombre(cls, value: object) -> object:
        """Trim the name so whitespace-only names fail min_length."""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, value: object) -> list[str]:
        """Accept the delimited string or an already-parsed sequence."""
        return parse_skills(value)

    @field_validator("score", mode="before")
    @classmethod
    def normalize_score(cls, value: object) -> float | None:
        """Malformed scores are treated as absent."""
        return parse_score(value)

    @property
    def score_band(self) -> ScoreBand:
        """Explicit scored/unscored case used for ranking."""
        return ScoreBand.UNSCORED if self.score is None else ScoreBand.SCORED


class CandidateRecord(CandidateFields):
    """A stored candidate with its identity and application timestamp."""

    id: int = Field(description="Storage-assigned identifier, never reused")
    fecha_aplicacion: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        alias="fechaAplicacion",
        description="When the candidate applied",
    )

    @field_validator("fecha_aplicacion", mode="after")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Interpret naive timestamps as UTC so all timestamps compare."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def to_public(self) -> dict[str, object]:
        """Serialize with the external camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)
