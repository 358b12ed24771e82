"""Tests for Settings configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from talent_directory_core.config.settings import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and defaults."""

    def test_default_settings(self) -> None:
        """Settings loads with no environment and correct defaults."""
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.db_backend == "sqlite"
        assert s.database_url.startswith("sqlite+aiosqlite")
        assert s.log_format == "console"

    def test_env_prefix(self) -> None:
        """TD_ environment variables override defaults."""
        env = {"TD_LOG_LEVEL": "DEBUG", "TD_LOG_FORMAT": "json"}
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.log_level == "DEBUG"
        assert s.log_format == "json"

    def test_postgres_backend_sets_database_url(self) -> None:
        """When db_backend=postgres, database_url is set from postgres_url."""
        with patch.dict(os.environ, {"TD_DB_BACKEND": "postgres"}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.database_url == s.postgres_url
        assert "asyncpg" in s.database_url

    def test_invalid_log_format_raises(self) -> None:
        """Unknown log format is rejected."""
        with patch.dict(os.environ, {"TD_LOG_FORMAT": "xml"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)  # type: ignore[call-arg]
