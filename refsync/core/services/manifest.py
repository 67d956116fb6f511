"""
Reference manifest — which source file feeds which section.

Adding a reference file to the consolidated document means adding a
``SectionSpec`` here.  Nothing is discovered from the filesystem.
"""

from __future__ import annotations

from refsync.core.data import templates
from refsync.core.models.section import SectionSpec
from refsync.core.services.extractors import extract_domain_patterns, static_extractor

# Generated document, relative to the repository root
OUTPUT_FILE = "FYSO-REFERENCE.md"

SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec(
        number=1,
        title="Field Types",
        source="skills/fyso-entity/reference/field-types.md",
        extract=static_extractor(templates.FIELD_TYPES),
    ),
    SectionSpec(
        number=2,
        title="MCP Operations",
        source="skills/fyso-plan/reference/mcp-operations.md",
        extract=static_extractor(templates.MCP_OPERATIONS),
    ),
    SectionSpec(
        number=3,
        title="Business Rules DSL",
        source="skills/fyso-rules/reference/dsl-reference.md",
        extract=static_extractor(templates.RULES_DSL),
    ),
    SectionSpec(
        number=4,
        title="Limitations",
        source="skills/fyso-plan/reference/limitations.md",
        extract=static_extractor(templates.LIMITATIONS),
    ),
    SectionSpec(
        number=5,
        title="Domain Patterns",
        source="skills/fyso-plan/reference/domain-patterns.md",
        extract=extract_domain_patterns,
    ),
    SectionSpec(
        number=6,
        title="Auth & Roles",
        source="skills/fyso-ui/reference/auth-patterns.md",
        extract=static_extractor(templates.AUTH_ROLES),
    ),
    SectionSpec(
        number=7,
        title="UI Components (@fyso/ui)",
        source="skills/fyso-ui/reference/fyso-ui-components.md",
        extract=static_extractor(templates.UI_COMPONENTS),
    ),
    SectionSpec(
        number=8,
        title="UI Patterns",
        source="skills/fyso-ui/reference/ui-patterns.md",
        extract=static_extractor(templates.UI_PATTERNS),
    ),
)


def ordered_sections(
    sections: tuple[SectionSpec, ...] | list[SectionSpec] = SECTIONS,
) -> list[SectionSpec]:
    """Sections in document order (ascending number)."""
    return sorted(sections, key=lambda s: s.number)
