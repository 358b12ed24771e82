"""Profile completeness scoring over a fixed field checklist."""

from __future__ import annotations

from talent_directory_core.constants import COMPLETENESS_FIELDS
from talent_directory_core.models.candidate import CandidateFields


def is_filled(value: object) -> bool:
    """A value counts as filled when it has non-blank text or non-empty items."""
    if value is None:
        return False
    if isinstance(value, list | tuple):
        return len(value) > 0
    return str(value).strip() != ""


def completeness(record: CandidateFields) -> float:
    """Return the fraction of checklist fields that are filled, in [0, 1]."""
    filled = sum(1 for name in COMPLETENESS_FIELDS if is_filled(getattr(record, name)))
    return filled / len(COMPLETENESS_FIELDS)
