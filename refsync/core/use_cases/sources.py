"""
Sources use case — inventory of the reference files behind each section.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from refsync.core.services.manifest import SECTIONS, ordered_sections
from refsync.core.services.reference_sync import source_digest


@dataclass
class SourceInfo:
    """One manifest entry and the state of its source file."""

    number: int
    title: str
    source: str
    exists: bool = False
    size: int = 0

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "title": self.title,
            "source": self.source,
            "exists": self.exists,
            "size": self.size,
        }


@dataclass
class SourcesReport:
    """All manifest sources plus a digest of their combined content."""

    root: Path | None = None
    sources: list[SourceInfo] = field(default_factory=list)
    digest: str = ""

    @property
    def present(self) -> int:
        return sum(1 for s in self.sources if s.exists)

    @property
    def missing(self) -> int:
        return len(self.sources) - self.present

    def to_dict(self) -> dict:
        return {
            "root": str(self.root) if self.root else None,
            "sources": [s.to_dict() for s in self.sources],
            "present": self.present,
            "missing": self.missing,
            "digest": self.digest,
        }


def describe_sources(root: Path) -> SourcesReport:
    """List every manifest source with existence and size.

    Read-only.  Missing sources are reported, not raised.
    """
    report = SourcesReport(root=root)

    for section in ordered_sections(SECTIONS):
        path = root / section.source
        info = SourceInfo(
            number=section.number,
            title=section.title,
            source=section.source,
        )
        if path.is_file():
            info.exists = True
            info.size = path.stat().st_size
        report.sources.append(info)

    report.digest = source_digest(root)
    return report
