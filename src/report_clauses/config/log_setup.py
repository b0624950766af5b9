"""Logging bootstrap for applications embedding the clause renderer."""

from __future__ import annotations

import logging

from .settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings.

    Args:
        settings: Settings to read ``log_level`` from. Defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, force=True)
