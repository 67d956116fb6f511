"""
Logging configuration — one-time setup for the refsync CLI.

Every module logs through ``logging.getLogger(__name__)``; this module
decides where those records go.  Console output goes to stderr so the
single status line on stdout stays clean.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  REFSYNC_LOG_LEVEL  >  WARNING

A log file is opt-in via REFSYNC_LOG_FILE (level: REFSYNC_LOG_FILE_LEVEL).
"""

from __future__ import annotations

import logging
import os
import sys

LEVEL_ENV_VAR = "REFSYNC_LOG_LEVEL"
FILE_ENV_VAR = "REFSYNC_LOG_FILE"
FILE_LEVEL_ENV_VAR = "REFSYNC_LOG_FILE_LEVEL"

# Console at WARNING and above: level and message only.
_FMT_MINIMAL = "%(levelname)s: %(message)s"

# Console at INFO/DEBUG, and the log file: logger name and line too.
_FMT_DETAIL = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> str:
    """Pick the console level name from CLI flags, falling back to the env."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV_VAR, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Replaces any handlers already on the root logger, so calling it again
    (e.g. once per CLI invocation in tests) never stacks handlers.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the log file; defaults to ``level``.
    """
    numeric_level = _parse_level(level)

    if numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_DETAIL, "%H:%M:%S"
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.addHandler(console)

    effective_level = numeric_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)

    root.setLevel(effective_level)

    # Errors inside logging must never change the sync verdict
    logging.raiseExceptions = False


def setup_logging_from_env(level: str) -> None:
    """``setup_logging`` with the file settings taken from the environment."""
    setup_logging(
        level=level,
        log_file=os.environ.get(FILE_ENV_VAR),
        log_file_level=os.environ.get(FILE_LEVEL_ENV_VAR),
    )


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
