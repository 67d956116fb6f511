"""
Section model — one entry of the reference manifest.

Binds a source reference file to its heading in the consolidated
document and to the extractor that summarizes it.
"""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


class SectionSpec(BaseModel):
    """A numbered section of the consolidated reference.

    Attributes:
        number:  Position in the document (1-based, ascending).
        title:   Heading text, rendered as ``## {number}. {title}``.
        source:  Source file path, relative to the repository root.
        extract: Pure function turning the source text into markdown.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(gt=0)
    title: str
    source: str
    extract: Callable[[str], str]

    @property
    def heading(self) -> str:
        return f"## {self.number}. {self.title}"
