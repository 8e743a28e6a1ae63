"""
Logging setup.

Modules log through `logging.getLogger(__name__)` with `event key=value`
messages; this only configures the root handler and level once per process.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level_name: str) -> int:
    level = getattr(logging, (level_name or "").upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level
