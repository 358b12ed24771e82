"""Shared constants for talent-directory."""

from __future__ import annotations

# Profile completeness checklist (attribute names on CandidateFields)
COMPLETENESS_FIELDS: tuple[str, ...] = (
    "email",
    "telefono",
    "categoria",
    "area",
    "job_title",
    "skills",
    "video_link",
    "reel_link",
    "portfolio_link",
    "linkedin_link",
    "experiencia",
    "educacion",
    "notas",
)

# Records scoring above this never appear in ranked, filtered or grouped views
SCORE_CEILING = 10.0

# Size of the ranked prefix used for the highlights view
HIGHLIGHT_CAP = 50

# Category labels
EDITORS_CATEGORY = "Editores"
ANIMATION_CATEGORY = "Animación"
FALLBACK_CATEGORY = "Otros"

# Sections that lead the highlights view, in this order
PRIORITY_CATEGORIES: tuple[str, ...] = (EDITORS_CATEGORY, ANIMATION_CATEGORY)

# Skills storage form
SKILLS_DELIMITER = ","
SKILLS_JOINER = ", "
