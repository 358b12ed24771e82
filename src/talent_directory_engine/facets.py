"""Distinct filter values across a candidate collection."""

from __future__ import annotations

from collections.abc import Iterable

from talent_directory_core.models.candidate import CandidateRecord
from talent_directory_core.models.views import FilterOptions


def _distinct_text(values: Iterable[str | None]) -> list[str]:
    return sorted({v for v in values if v is not None and v.strip()})


def filter_options(records: Iterable[CandidateRecord]) -> FilterOptions:
    """Collect sorted distinct categoria, area, job title and skill values.

    Computed over the whole collection, including records not yet eligible
    for ranked views.
    """
    records = list(records)
    return FilterOptions(
        categorias=_distinct_text(r.categoria for r in records),
        areas=_distinct_text(r.area for r in records),
        job_titles=_distinct_text(r.job_title for r in records),
        skills=sorted({skill for r in records for skill in r.skills}),
    )
