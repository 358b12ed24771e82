"""Heuristic display-category classification.

Rules are evaluated top to bottom and the first match wins. Pattern rules
look at a probe built from the first non-empty of categoria, area and job
title; field rules fall back to the raw categoria or area text.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from talent_directory_core.constants import (
    ANIMATION_CATEGORY,
    EDITORS_CATEGORY,
    FALLBACK_CATEGORY,
)
from talent_directory_core.models.candidate import CandidateFields

Classifier = Callable[[CandidateFields], str]


@dataclass(frozen=True)
class CategoryRule:
    """A labelled pattern tested against the lowercase probe text."""

    label: str
    pattern: re.Pattern[str]

    def apply(self, record: CandidateFields, probe: str) -> str | None:
        """Return the label when the pattern matches the probe."""
        return self.label if self.pattern.search(probe) else None


@dataclass(frozen=True)
class FieldRule:
    """Use a raw text field verbatim (trimmed) as the label when non-blank."""

    field_name: str

    def apply(self, record: CandidateFields, probe: str) -> str | None:
        """Return the trimmed field text, or None when blank."""
        value = getattr(record, self.field_name)
        if value is None:
            return None
        text = str(value).strip()
        return text or None


CATEGORY_RULES: tuple[CategoryRule | FieldRule, ...] = (
    CategoryRule(
        label=EDITORS_CATEGORY,
        pattern=re.compile(r"editor|edición|edicion|video edit", re.IGNORECASE),
    ),
    CategoryRule(
        label=ANIMATION_CATEGORY,
        pattern=re.compile(
            r"animación|animacion|motion|after effects|2d|3d", re.IGNORECASE
        ),
    ),
    FieldRule("categoria"),
    FieldRule("area"),
)

_PROBE_FIELDS: tuple[str, ...] = ("categoria", "area", "job_title")


def category_probe(record: CandidateFields) -> str:
    """Lowercase text of the first non-empty of categoria, area, job title.

    Whitespace-only text is non-empty here and still wins the probe; blank
    checks belong to the field rules.
    """
    for name in _PROBE_FIELDS:
        value = getattr(record, name)
        if value:
            return str(value).lower()
    return ""


def classify(
    record: CandidateFields,
    rules: tuple[CategoryRule | FieldRule, ...] = CATEGORY_RULES,
) -> str:
    """Map a record to its display category label. Never fails."""
    probe = category_probe(record)
    for rule in rules:
        label = rule.apply(record, probe)
        if label is not None:
            return label
    return FALLBACK_CATEGORY
