"""Logging setup shared by the CLI and the API server."""

from __future__ import annotations

import logging

from resumify.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger once.

    Args:
        level: Level name or number; defaults to ``RESUMIFY_LOG_LEVEL``.
    """
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("resumify").setLevel(level)
