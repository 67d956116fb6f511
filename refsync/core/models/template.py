"""
Generated file model — the in-memory form of the consolidated reference.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by the assembler.

    Attributes:
        path:      Relative path from the repository root.
        content:   Full file content.
        reason:    How this file was generated.
    """

    path: str
    content: str
    reason: str = ""
