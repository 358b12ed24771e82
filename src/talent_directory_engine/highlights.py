"""Capped, category-grouped highlights view over a ranked sequence."""

from __future__ import annotations

from collections.abc import Sequence

from talent_directory_core.constants import HIGHLIGHT_CAP, PRIORITY_CATEGORIES
from talent_directory_core.models.candidate import CandidateRecord
from talent_directory_core.models.views import CategorySection
from talent_directory_engine.classifier import Classifier, classify


def order_labels(labels: Sequence[str]) -> list[str]:
    """Priority labels first in fixed order, then the rest alphabetically."""
    leading = [label for label in PRIORITY_CATEGORIES if label in labels]
    trailing = sorted(label for label in labels if label not in PRIORITY_CATEGORIES)
    return leading + trailing


def group_top(
    ranked: Sequence[CandidateRecord],
    cap: int = HIGHLIGHT_CAP,
    classifier: Classifier = classify,
) -> list[CategorySection]:
    """Group the first ``cap`` ranked records into ordered category sections.

    The input must already be ranked; this takes a prefix and never re-sorts.
    """
    buckets: dict[str, list[CandidateRecord]] = {}
    for record in ranked[:cap]:
        buckets.setdefault(classifier(record), []).append(record)

    return [
        CategorySection(label=label, members=buckets[label])
        for label in order_labels(list(buckets))
        if buckets[label]
    ]
