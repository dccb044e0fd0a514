"""Logging setup for the CLI process.

Library modules only create ``logging.getLogger(__name__)`` loggers;
this module is the one place that attaches a handler.  The handler sits
on the ``pattern_demo`` package logger and writes to stderr, so log
records never mix with demo output on stdout and the root logger of a
host application is left alone.
"""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "pattern_demo"
LOG_LEVEL_ENV_VAR = "PATTERN_DEMO_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(verbose: bool = False) -> int:
    """Pick the log level: ``--verbose`` wins, then the env var, then WARNING.

    Unknown level names in the environment fall back to the default.
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LEVEL
    return level if isinstance(level, int) else DEFAULT_LEVEL


def configure_logging(verbose: bool = False) -> logging.Logger:
    """(Re)attach a single stderr handler to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(resolve_log_level(verbose))
    package_logger.propagate = False
    return package_logger
