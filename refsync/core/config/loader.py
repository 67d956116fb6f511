"""
Configuration loader — resolves the repository root.

There is no configuration file: the manifest is fixed in code.  The only
thing to configure is *where* the reference sources live.  Resolution
order:

    --root option  >  REFSYNC_ROOT env var  >  walk up from CWD  >  CWD
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from refsync.core.services.manifest import OUTPUT_FILE

logger = logging.getLogger(__name__)

ROOT_ENV_VAR = "REFSYNC_ROOT"

# Any of these marks a repository root
ROOT_MARKERS = ("skills", OUTPUT_FILE)


class ConfigError(Exception):
    """Raised when the repository root is invalid."""


def find_repo_root(start_dir: Path | None = None) -> Path | None:
    """Search for the repository root starting from a directory, walking up.

    This allows running the sync from a subdirectory of the repository.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        The first directory containing a root marker, or None.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        if any((current / marker).exists() for marker in ROOT_MARKERS):
            return current
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def resolve_root(explicit: Path | str | None = None) -> Path:
    """Resolve the repository root to sync.

    Args:
        explicit: Root given on the command line, if any.

    Returns:
        Absolute path of the repository root.

    Raises:
        ConfigError: If an explicitly configured root is not a directory.
    """
    if explicit is None:
        explicit = os.environ.get(ROOT_ENV_VAR) or None

    if explicit is not None:
        root = Path(explicit).expanduser()
        if not root.is_dir():
            raise ConfigError(f"Repository root not found: {root}")
        logger.debug("Using explicit repository root %s", root)
        return root.resolve()

    found = find_repo_root()
    if found is None:
        logger.info("No repository root marker found, using %s", Path.cwd())
        return Path.cwd().resolve()

    logger.debug("Found repository root %s", found)
    return found
