"""Logging setup for the memora command line.

Library modules only create loggers; ``cli/memora.py`` calls
``configure_logging`` once with the ``--log-level`` it was given.
"""

from __future__ import annotations

import logging


_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format=_LOG_FORMAT, force=True)
