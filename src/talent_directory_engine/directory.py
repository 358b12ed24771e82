"""Candidate directory: the ranked, filtered and highlights views."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from talent_directory_core.constants import HIGHLIGHT_CAP
from talent_directory_core.exceptions import CandidateNotFoundError
from talent_directory_core.interfaces import CandidateSource
from talent_directory_core.models.candidate import CandidateRecord
from talent_directory_core.models.query import FilterQuery
from talent_directory_core.models.views import CategorySection, FilterOptions
from talent_directory_engine.facets import filter_options
from talent_directory_engine.filtering import filter_candidates
from talent_directory_engine.highlights import group_top
from talent_directory_engine.ranking import rank

logger = structlog.get_logger()


class CandidateDirectory:
    """Derived views over an explicit snapshot of candidate records.

    The snapshot is copied on construction and never mutated. Each view is
    recomputed from it on every call.
    """

    def __init__(self, records: Iterable[CandidateRecord]) -> None:
        """Initialize with the candidate collection supplied by storage."""
        self._records: tuple[CandidateRecord, ...] = tuple(records)

    @classmethod
    async def from_source(cls, source: CandidateSource) -> CandidateDirectory:
        """Snapshot the full collection held by a candidate source."""
        return cls(await source.list_all())

    def __len__(self) -> int:
        """Number of records in the snapshot, eligible or not."""
        return len(self._records)

    def ranked(self) -> list[CandidateRecord]:
        """All eligible candidates, best first."""
        ranked = rank(self._records)
        logger.info(
            "candidates_ranked",
            total=len(self._records),
            ranked=len(ranked),
            excluded=len(self._records) - len(ranked),
        )
        return ranked

    def search(self, query: FilterQuery | None = None) -> list[CandidateRecord]:
        """The all-candidates view: rank, then apply the query predicates."""
        query = query or FilterQuery()
        ranked = self.ranked()
        matches = filter_candidates(ranked, query)
        logger.info(
            "candidates_filtered",
            query=query.model_dump(exclude_none=True),
            ranked=len(ranked),
            matched=len(matches),
        )
        return matches

    def highlights(self, cap: int = HIGHLIGHT_CAP) -> list[CategorySection]:
        """The top-candidates view grouped by display category."""
        sections = group_top(self.ranked(), cap=cap)
        logger.info(
            "highlights_grouped",
            cap=cap,
            sections=[s.label for s in sections],
            members=sum(len(s.members) for s in sections),
        )
        return sections

    def get(self, candidate_id: int) -> CandidateRecord:
        """Look up one candidate by id, regardless of eligibility."""
        for record in self._records:
            if record.id == candidate_id:
                return record
        raise CandidateNotFoundError(candidate_id)

    def filter_options(self) -> FilterOptions:
        """Distinct values for the filter surface."""
        return filter_options(self._records)
