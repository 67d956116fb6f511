"""
Output file persistence — read and atomically write the generated reference.

The generated file is both the previous output (read by ``--check``)
and the next output (written by a sync).  Writes go to a temp file in
the same directory and are renamed into place, so a crash mid-write
never leaves a half-written reference behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def read_exact(path: Path) -> str:
    """Read a file as UTF-8 text exactly as stored.

    Line endings are kept as-is and undecodable bytes become U+FFFD, so a
    stray CRLF or bad byte shows up in the output instead of being hidden
    or aborting the build.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def read_output(path: Path) -> str | None:
    """Read the existing generated file.

    Returns:
        The file text, or None if it doesn't exist yet.
    """
    if not path.is_file():
        logger.info("No generated file at %s", path)
        return None

    text = read_exact(path)
    logger.debug("Read %d chars from %s", len(text), path)
    return text


def write_output(path: Path, content: str) -> None:
    """Overwrite the generated file (atomic write).

    Args:
        path: Target path of the generated file.
        content: Full document text.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}_",
            suffix=".tmp",
        )
        os.close(fd)
        tmp = Path(tmp_path)
        try:
            # newline="" keeps "\n" line endings on every platform
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            tmp.replace(path)
            logger.debug("Wrote %s (%d chars)", path, len(content))
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except Exception as e:
        logger.error("Failed to write %s: %s", path, e)
        raise
