"""
Domain models — Pydantic types for the reference synchronizer.

    from refsync.core.models import GeneratedFile, SectionSpec
"""

from refsync.core.models.section import SectionSpec
from refsync.core.models.template import GeneratedFile

__all__ = [
    "GeneratedFile",
    "SectionSpec",
]
