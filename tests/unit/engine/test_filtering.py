"""Tests for the filter engine."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from talent_directory_core.models.query import FilterQuery
from talent_directory_engine.filtering import build_predicates, filter_candidates
from tests.mocks.mock_factories import make_candidate


@pytest.fixture
def records() -> list:
    """A small ranked-looking sequence."""
    return [
        make_candidate(
            nombre="Juan Pérez",
            email="juan@example.com",
            categoria="Animación",
            area="Creatividad",
            job_title="Animador 2D",
            skills=["After Effects", "Illustrator"],
        ),
        make_candidate(
            nombre="María González",
            email="maria@example.com",
            categoria="Editores",
            area="Postproducción",
            job_title="Editora de video",
            skills=["Premiere", "DaVinci"],
        ),
        make_candidate(
            nombre="Ana Martínez",
            email="ana@example.com",
            categoria="Editores",
            area="Comunicación",
            job_title="Editora de contenido",
            skills=["Premiere", "Subtítulos"],
        ),
        make_candidate(nombre="Sin Datos"),
    ]


def _names(result: list) -> list[str]:
    return [r.nombre for r in result]


@pytest.mark.unit
class TestFilterCandidates:
    """Test filter_candidates()."""

    def test_no_predicates_returns_input(self, records: list) -> None:
        """An empty query returns the input unchanged."""
        assert filter_candidates(records, FilterQuery()) == records

    def test_empty_query_skips_predicate_building(self, records: list) -> None:
        """An empty query short-circuits before any predicate is built."""
        with patch("talent_directory_engine.filtering.build_predicates") as build:
            assert filter_candidates(records, FilterQuery(search="   ")) == records
        build.assert_not_called()

    def test_empty_input(self) -> None:
        """Filtering nothing gives nothing."""
        assert filter_candidates([], FilterQuery(search="x")) == []

    def test_categoria_exact(self, records: list) -> None:
        """categoria is an exact match on the raw field."""
        result = filter_candidates(records, FilterQuery(categoria="Editores"))
        assert _names(result) == ["María González", "Ana Martínez"]
        assert filter_candidates(records, FilterQuery(categoria="Editor")) == []

    def test_categoria_matches_raw_not_derived_label(self) -> None:
        """A record classified as Animación does not match categoria=Animación."""
        record = make_candidate(categoria="Motion Designer")
        assert filter_candidates([record], FilterQuery(categoria="Animación")) == []

    def test_exact_match_is_trimmed(self) -> None:
        """Surrounding whitespace on either side is ignored."""
        record = make_candidate(area=" Creatividad ")
        assert filter_candidates([record], FilterQuery(area="Creatividad  ")) == [record]

    def test_job_title_exact(self, records: list) -> None:
        """job_title is an exact match."""
        result = filter_candidates(records, FilterQuery(job_title="Editora de video"))
        assert _names(result) == ["María González"]

    def test_skills_substring_of_any_token(self, records: list) -> None:
        """skills matches a substring of any individual token."""
        result = filter_candidates(records, FilterQuery(skills="after"))
        assert _names(result) == ["Juan Pérez"]

    def test_skills_does_not_span_tokens(self, records: list) -> None:
        """The skills predicate never matches across two tokens."""
        assert filter_candidates(records, FilterQuery(skills="Effects, Illu")) == []

    def test_search_across_fields(self, records: list) -> None:
        """search looks at name, email, job title and joined skills."""
        assert _names(filter_candidates(records, FilterQuery(search="MARÍA"))) == [
            "María González"
        ]
        assert _names(filter_candidates(records, FilterQuery(search="ana@"))) == [
            "Ana Martínez"
        ]
        assert _names(filter_candidates(records, FilterQuery(search="contenido"))) == [
            "Ana Martínez"
        ]

    def test_search_over_joined_skills(self, records: list) -> None:
        """search sees skills concatenated with spaces."""
        result = filter_candidates(records, FilterQuery(search="effects illustrator"))
        assert _names(result) == ["Juan Pérez"]

    def test_search_ignores_categoria(self, records: list) -> None:
        """search does not look at categoria or area."""
        assert filter_candidates(records, FilterQuery(search="Creatividad")) == []

    def test_predicates_are_conjunctive(self, records: list) -> None:
        """Every supplied predicate must hold."""
        query = FilterQuery(categoria="Editores", skills="davinci")
        assert _names(filter_candidates(records, query)) == ["María González"]

    def test_preserves_input_order(self, records: list) -> None:
        """Output is a subsequence of the input."""
        reversed_records = list(reversed(records))
        result = filter_candidates(reversed_records, FilterQuery(search="editora"))
        assert _names(result) == ["Ana Martínez", "María González"]

    def test_blank_fields_never_match_exact_filters(self, records: list) -> None:
        """Records without the field never match."""
        result = filter_candidates(records, FilterQuery(area="Comunicación"))
        assert "Sin Datos" not in _names(result)


@pytest.mark.unit
class TestBuildPredicates:
    """Test build_predicates()."""

    def test_one_predicate_per_supplied_field(self) -> None:
        """Only supplied fields produce predicates."""
        assert build_predicates(FilterQuery()) == []
        query = FilterQuery(categoria="a", area="b", job_title="c", skills="d", search="e")
        assert len(build_predicates(query)) == 5
