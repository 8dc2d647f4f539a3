from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_level(level: str | None) -> int:
    """Map a LOG_LEVEL string (``debug``, ``INFO``, ...) to a logging level, defaulting to INFO."""
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
