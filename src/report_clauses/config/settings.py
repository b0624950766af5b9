"""Centralized settings for clause rendering loaded from environment variables.

All configuration is defined once here. Other modules should import
``get_settings()`` rather than calling ``os.getenv()`` directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Clause-rendering configuration backed by environment variables.

    Field names are **lowercased** versions of the env-var names, with the
    ``REPORT_CLAUSES_`` prefix stripped.

    Example::

        settings = Settings()  # reads .env + real env
        threshold = settings.in_list_warning_threshold
    """

    model_config = SettingsConfigDict(
        env_prefix="REPORT_CLAUSES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- Rendering ---------------------------------------------------------

    in_list_warning_threshold: int = 1000
    """Warn when a single IN list binds more values than this (Oracle caps lists at 1000)."""

    # -- Logging -----------------------------------------------------------

    log_level: str = "INFO"
    """Root log level applied by ``configure_logging()``."""

    log_bound_values: bool = False
    """Include bound parameter values in debug logs (may expose report data)."""


def get_settings() -> Settings:
    """Return the process-wide ``Settings`` instance.

    The ``.env`` file is read at most once per process.

    Returns:
        The global ``Settings`` object.
    """
    return _settings


_settings = Settings()
