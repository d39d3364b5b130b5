"""Process-level helpers shared by the entry points."""

from __future__ import annotations

import logging

from hex_cells.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str | int = LOG_LEVEL) -> int:
    """Install the root handler once and return the numeric level in effect."""

    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"unknown log level: {level}")
    else:
        numeric_level = int(level)

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)
    return numeric_level
