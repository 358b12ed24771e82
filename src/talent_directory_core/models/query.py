"""Filter query parameters for the all-candidates view."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class FilterQuery(BaseModel):
    """Conjunctive filter predicates. Blank values count as not supplied."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    categoria: str | None = Field(default=None, description="Exact categoria match")
    area: str | None = Field(default=None, description="Exact area match")
    job_title: str | None = Field(
        default=None,
        validation_alias=AliasChoices("job_title", "jobTitle"),
        serialization_alias="jobTitle",
        description="Exact job title match",
    )
    skills: str | None = Field(
        default=None, description="Substring of any individual skill token"
    )
    search: str | None = Field(
        default=None, description="Free text over name, email, job title and skills"
    )

    @field_validator("categoria", "area", "job_title", "skills", "search", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        """Trim text and drop blank values."""
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> FilterQuery:
        """Build a query from raw request parameters, ignoring unknown keys."""
        return cls.model_validate(dict(params))

    @property
    def is_empty(self) -> bool:
        """True when no predicate is supplied."""
        return not any(
            (self.categoria, self.area, self.job_title, self.skills, self.search)
        )
