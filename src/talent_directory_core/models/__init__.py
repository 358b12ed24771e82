"""Domain models for talent-directory."""

from talent_directory_core.models.candidate import (
    CandidateFields,
    CandidateRecord,
    ScoreBand,
    join_skills,
    parse_score,
    parse_skills,
)
from talent_directory_core.models.query import FilterQuery
from talent_directory_core.models.views import CategorySection, FilterOptions

__all__ = [
    "CandidateFields",
    "CandidateRecord",
    "CategorySection",
    "FilterOptions",
    "FilterQuery",
    "ScoreBand",
    "join_skills",
    "parse_score",
    "parse_skills",
]
