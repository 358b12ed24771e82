"""Deterministic ranking by score, completeness and application date."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from talent_directory_core.constants import SCORE_CEILING
from talent_directory_core.models.candidate import CandidateRecord, ScoreBand
from talent_directory_engine.completeness import completeness


@dataclass(frozen=True)
class RankedCandidate:
    """A record annotated with its completeness for one ranking pass."""

    record: CandidateRecord
    completeness: float

    def sort_key(self) -> tuple[ScoreBand, float, float, datetime]:
        """Key for a descending sort: scored before unscored, then score,
        completeness and most recent application first."""
        record = self.record
        score = record.score if record.score is not None else 0.0
        return (record.score_band, score, self.completeness, record.fecha_aplicacion)


def is_eligible(record: CandidateRecord) -> bool:
    """Records scoring above the ceiling are not yet eligible for any view."""
    return record.score is None or record.score <= SCORE_CEILING


def rank_annotated(records: Iterable[CandidateRecord]) -> list[RankedCandidate]:
    """Drop ineligible records, annotate completeness and sort best first.

    The sort is stable, so records equal on every key keep input order.
    """
    annotated = [
        RankedCandidate(record=record, completeness=completeness(record))
        for record in records
        if is_eligible(record)
    ]
    annotated.sort(key=RankedCandidate.sort_key, reverse=True)
    return annotated


def rank(records: Iterable[CandidateRecord]) -> list[CandidateRecord]:
    """Return eligible records in priority order, without derived fields."""
    return [entry.record for entry in rank_annotated(records)]
