"""
Reference synchronization — build, compare, and fingerprint the consolidated reference.

Channel-independent: the CLI (``refsync.main``) and the use cases call
into this module; nothing here prints or exits.
"""

from __future__ import annotations

import hashlib
import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from refsync.core.models.section import SectionSpec
from refsync.core.models.template import GeneratedFile
from refsync.core.persistence.output_file import read_exact
from refsync.core.services.manifest import OUTPUT_FILE, SECTIONS, ordered_sections

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Assemble
# ═══════════════════════════════════════════════════════════════════


DOCUMENT_TITLE = "# Fyso Platform — Consolidated Reference"
GENERATOR_NAME = "refsync"

_SYNC_DATE_RE = re.compile(r"Last sync: \d{4}-\d{2}-\d{2}")
_SYNC_DATE_PLACEHOLDER = "Last sync: DATE"


def today_utc() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def render_section(section: SectionSpec, content: str | None) -> list[str]:
    """Lines for one section: divider, heading, body, source footer.

    Args:
        section: The manifest entry.
        content: Source text, or None when the source file is missing.
    """
    if content is None:
        body = f"> Source file not found: `{section.source}`"
    else:
        body = section.extract(content)

    return [
        "",
        "---",
        "",
        section.heading,
        "",
        body,
        "",
        f"Source: `{section.source}`",
    ]


def read_source(root: Path, section: SectionSpec) -> str | None:
    """Read a section's source file, or None if it doesn't exist."""
    path = root / section.source
    if not path.is_file():
        logger.warning("Source file not found: %s", section.source)
        return None
    return read_exact(path)


def build_document(
    root: Path,
    *,
    sections: tuple[SectionSpec, ...] | list[SectionSpec] = SECTIONS,
    today: str | None = None,
) -> GeneratedFile:
    """Build the consolidated reference from the source files under ``root``.

    Sources are read one at a time in document order.  A missing source
    never fails the build: its section gets a "not found" notice instead.

    Args:
        root: Repository root the source paths are relative to.
        sections: Manifest to render (default: the built-in one).
        today: Sync date to embed (default: current UTC date).

    Returns:
        GeneratedFile for ``FYSO-REFERENCE.md``.
    """
    ordered = ordered_sections(sections)
    sync_date = today or today_utc()

    lines = [
        DOCUMENT_TITLE,
        f"<!-- AUTO-GENERATED by {GENERATOR_NAME} — DO NOT EDIT MANUALLY -->",
        f"<!-- Source: skills/*/reference/*.md — Last sync: {sync_date} -->",
        "",
        "Quick-reference for all Fyso concepts. "
        f"Read this ONE file instead of {len(ordered)} individual reference files. "
        "For deep dives, read the source files in `skills/*/reference/`.",
    ]

    missing = 0
    for section in ordered:
        content = read_source(root, section)
        if content is None:
            missing += 1
        lines.extend(render_section(section, content))

    logger.info(
        "Built reference: %d section(s), %d missing source(s)",
        len(ordered), missing,
    )

    return GeneratedFile(
        path=OUTPUT_FILE,
        content="\n".join(lines) + "\n",
        reason=f"Consolidated from {len(ordered) - missing}/{len(ordered)} reference files",
    )


# ═══════════════════════════════════════════════════════════════════
#  Compare
# ═══════════════════════════════════════════════════════════════════


def normalize_sync_date(text: str) -> str:
    """Replace the embedded sync date with a fixed placeholder."""
    return _SYNC_DATE_RE.sub(_SYNC_DATE_PLACEHOLDER, text, count=1)


def is_up_to_date(current: str | None, generated: str) -> bool:
    """Whether the committed reference matches a fresh build.

    Only the sync date may differ.  A missing file (``current`` is None)
    is always stale.
    """
    if current is None:
        return False
    return normalize_sync_date(current) == normalize_sync_date(generated)


# ═══════════════════════════════════════════════════════════════════
#  Fingerprint
# ═══════════════════════════════════════════════════════════════════


def source_digest(
    root: Path,
    sections: tuple[SectionSpec, ...] | list[SectionSpec] = SECTIONS,
) -> str:
    """SHA-256 over the raw bytes of every present source file, in document order."""
    hasher = hashlib.sha256()
    for section in ordered_sections(sections):
        path = root / section.source
        if path.is_file():
            hasher.update(path.read_bytes())
    return hasher.hexdigest()
