"""
Sync use case — regenerate the consolidated reference, or check it for drift.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from refsync.core.persistence.output_file import read_output, write_output
from refsync.core.services.manifest import SECTIONS
from refsync.core.services.reference_sync import build_document, is_up_to_date

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Outcome of a sync or check run."""

    check: bool = False
    output_path: Path | None = None
    sections: int = 0
    written: bool = False
    up_to_date: bool = False
    output_exists: bool = False

    @property
    def ok(self) -> bool:
        return self.up_to_date if self.check else self.written

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def to_dict(self) -> dict:
        return {
            "mode": "check" if self.check else "generate",
            "output_path": str(self.output_path) if self.output_path else None,
            "sections": self.sections,
            "written": self.written,
            "up_to_date": self.up_to_date,
            "output_exists": self.output_exists,
            "ok": self.ok,
        }


def run_sync(
    root: Path,
    *,
    check: bool = False,
    today: str | None = None,
) -> SyncResult:
    """Build the reference and either write it or compare it to the file on disk.

    Args:
        root: Repository root.
        check: Compare only, never write.
        today: Sync date to embed (default: current UTC date).

    Returns:
        SyncResult.  In check mode ``up_to_date`` is the verdict; otherwise
        ``written`` is True once the file is replaced.
    """
    generated = build_document(root, today=today)
    logger.info("%s: %s", generated.path, generated.reason)
    output_path = root / generated.path

    result = SyncResult(
        check=check,
        output_path=output_path,
        sections=len(SECTIONS),
    )

    if check:
        current = read_output(output_path)
        result.output_exists = current is not None
        result.up_to_date = is_up_to_date(current, generated.content)
        logger.info(
            "Check %s: %s", output_path,
            "up to date" if result.up_to_date else "stale",
        )
        return result

    write_output(output_path, generated.content)
    result.written = True
    result.output_exists = True
    logger.info("Synced %s (%d sections)", output_path, result.sections)
    return result
