"""Conjunctive filtering over an already ranked sequence."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from talent_directory_core.models.candidate import CandidateRecord
from talent_directory_core.models.query import FilterQuery

Predicate = Callable[[CandidateRecord], bool]


def _exact(field_name: str, expected: str) -> Predicate:
    def matches(record: CandidateRecord) -> bool:
        value = getattr(record, field_name)
        return value is not None and str(value).strip() == expected

    return matches


def _skill_contains(fragment: str) -> Predicate:
    needle = fragment.lower()

    def matches(record: CandidateRecord) -> bool:
        return any(needle in skill.lower() for skill in record.skills)

    return matches


def _search(text: str) -> Predicate:
    needle = text.lower()

    def matches(record: CandidateRecord) -> bool:
        haystacks = (
            record.nombre,
            record.email,
            record.job_title,
            " ".join(record.skills),
        )
        return any(needle in str(h).lower() for h in haystacks if h)

    return matches


def build_predicates(query: FilterQuery) -> list[Predicate]:
    """Translate the supplied query fields into record predicates."""
    predicates: list[Predicate] = []
    if query.categoria:
        predicates.append(_exact("categoria", query.categoria))
    if query.area:
        predicates.append(_exact("area", query.area))
    if query.job_title:
        predicates.append(_exact("job_title", query.job_title))
    if query.skills:
        predicates.append(_skill_contains(query.skills))
    if query.search:
        predicates.append(_search(query.search))
    return predicates


def filter_candidates(
    records: Iterable[CandidateRecord],
    query: FilterQuery,
) -> list[CandidateRecord]:
    """Keep records matching every supplied predicate, preserving order.

    Skill matching is case-insensitive, like the free-text search.
    """
    if query.is_empty:
        return list(records)
    predicates = build_predicates(query)
    return [record for record in records if all(p(record) for p in predicates)]
