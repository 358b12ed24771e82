"""Derived view models returned by the directory engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from talent_directory_core.models.candidate import CandidateRecord


class CategorySection(BaseModel):
    """One section of the highlights view."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Display category label")
    members: list[CandidateRecord] = Field(description="Members in rank order")

    def to_public(self) -> dict[str, object]:
        """Serialize with external camelCase candidate fields."""
        return {
            "label": self.label,
            "members": [member.to_public() for member in self.members],
        }


class FilterOptions(BaseModel):
    """Distinct values available to the filter surface."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    categorias: list[str] = Field(default_factory=list, description="Distinct categoria values")
    areas: list[str] = Field(default_factory=list, description="Distinct area values")
    job_titles: list[str] = Field(
        default_factory=list, alias="jobTitles", description="Distinct job titles"
    )
    skills: list[str] = Field(default_factory=list, description="Distinct skill tokens")
