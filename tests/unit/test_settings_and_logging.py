"""Unit tests for settings and clause-render logging."""

import logging
from unittest.mock import patch

import pytest

from report_clauses.config import Settings, configure_logging
from report_clauses.entities.in_clause import IN_OPERATORS, InClauseBuilder, render_in_clause
from report_clauses.models import ClauseRequest

_BUILDER_LOGGER = "report_clauses.entities.in_clause.builder"


def _make_request() -> ClauseRequest:
    return ClauseRequest(column="ID", parameter_name="ids")


class TestSettings:
    """Environment-backed configuration."""

    def test_defaults(self, test_settings: Settings) -> None:
        assert test_settings.in_list_warning_threshold == 1000
        assert test_settings.log_bound_values is False
        assert test_settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPORT_CLAUSES_IN_LIST_WARNING_THRESHOLD", "5")
        monkeypatch.setenv("REPORT_CLAUSES_LOG_BOUND_VALUES", "true")
        settings = Settings(_env_file=None)
        assert settings.in_list_warning_threshold == 5
        assert settings.log_bound_values is True


class TestRenderLogging:
    """Warnings and debug records emitted while rendering."""

    def test_warns_over_threshold(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = Settings(_env_file=None, in_list_warning_threshold=2)
        with caplog.at_level(logging.WARNING, logger=_BUILDER_LOGGER):
            output = render_in_clause(_make_request(), [1, 2, 3], IN_OPERATORS, settings)
        assert output.placeholder_count == 3
        assert "binds 3 values" in caplog.text

    def test_no_warning_at_threshold(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = Settings(_env_file=None, in_list_warning_threshold=3)
        with caplog.at_level(logging.WARNING, logger=_BUILDER_LOGGER):
            render_in_clause(_make_request(), [1, 2, 3], IN_OPERATORS, settings)
        assert caplog.records == []

    def test_nulls_do_not_count_toward_threshold(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = Settings(_env_file=None, in_list_warning_threshold=1)
        with caplog.at_level(logging.WARNING, logger=_BUILDER_LOGGER):
            render_in_clause(_make_request(), [None, None, 1], IN_OPERATORS, settings)
        assert caplog.records == []

    def test_bound_values_hidden_by_default(
        self, caplog: pytest.LogCaptureFixture, test_settings: Settings
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger=_BUILDER_LOGGER):
            render_in_clause(_make_request(), ["secret"], IN_OPERATORS, test_settings)
        assert "secret" not in caplog.text
        assert "ID IN (?)" in caplog.text

    def test_bound_values_logged_when_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = Settings(_env_file=None, log_bound_values=True)
        with caplog.at_level(logging.DEBUG, logger=_BUILDER_LOGGER):
            render_in_clause(_make_request(), ["visible"], IN_OPERATORS, settings)
        assert "visible" in caplog.text

    def test_try_render_logs_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger=_BUILDER_LOGGER):
            InClauseBuilder().try_render(_make_request(), 42)
        assert "unsupported_parameter_type" in caplog.text


class TestConfigureLogging:
    """configure_logging() passes the configured level to basicConfig."""

    def test_sets_root_level(self) -> None:
        with patch("logging.basicConfig") as basic_config:
            configure_logging(Settings(_env_file=None, log_level="debug"))
        basic_config.assert_called_once_with(level=logging.DEBUG, force=True)

    def test_unknown_level_falls_back_to_info(self) -> None:
        with patch("logging.basicConfig") as basic_config:
            configure_logging(Settings(_env_file=None, log_level="chatty"))
        basic_config.assert_called_once_with(level=logging.INFO, force=True)
