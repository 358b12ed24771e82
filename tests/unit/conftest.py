"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from talent_directory_core.models.candidate import CandidateRecord
from tests.mocks.mock_factories import make_candidate, make_full_candidate
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def sample_candidate() -> CandidateRecord:
    """Return a record with only a name."""
    return make_candidate()


@pytest.fixture
def full_candidate() -> CandidateRecord:
    """Return a record with every completeness field filled."""
    return make_full_candidate()
