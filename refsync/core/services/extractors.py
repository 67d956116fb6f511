"""
Section extractors — source markdown in, section body out.

Every extractor has the same shape, ``(content: str) -> str``, and never
raises on unexpected input: a source that doesn't look the way we expect
simply yields a thinner (possibly empty) summary.

Most sections are hand-curated and ignore their source entirely; those
are built with :func:`static_extractor`.  Only the domain patterns
section reads its source.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

logger = logging.getLogger(__name__)


Extractor = Callable[[str], str]


def static_extractor(template: str) -> Extractor:
    """Wrap a fixed markdown block as an extractor that ignores its input."""

    def extract(content: str) -> str:
        return template

    return extract


# ═══════════════════════════════════════════════════════════════════
#  Domain patterns
# ═══════════════════════════════════════════════════════════════════


_H2_SPLIT_RE = re.compile(r"^## ", re.MULTILINE)
_ENTITY_RE = re.compile(r"\*\*(\w+)\*\*", re.ASCII)
_RELATION_RE = re.compile(r"rel→(\w+)", re.ASCII)

_RELATION_MARKER = "rel→"
_ENTITY_BULLET = "- **"
_ENTITIES_HEADING = "### Entities"

# Headings that describe the document rather than a business domain.
# A real domain titled e.g. "Universal Store" is dropped too.
_SKIP_TITLE_PREFIXES = ("Domain", "Universal", "#")

_RULE_PREFIXES = ("- Compute:", "- Validate:", "- Transform:")


def extract_domain_patterns(content: str) -> str:
    """Summarize each business domain: entities, relations, and rules.

    The source is split on second-level headings.  A chunk counts as a
    domain when its title is not one of the document-level headings and
    it either has an ``### Entities`` sub-heading or at least one
    ``- **Name**`` bullet.

    Returns:
        One ``### {domain}`` block per domain, separated by blank lines,
        or an empty string when nothing matched.
    """
    domains: list[str] = []
    chunks = [c for c in _H2_SPLIT_RE.split(content) if c.strip()]

    for chunk in chunks:
        lines = chunk.split("\n")
        title = lines[0].strip()
        if not title:
            continue
        if title.startswith(_SKIP_TITLE_PREFIXES):
            continue
        if _ENTITIES_HEADING not in chunk and not any(
            line.startswith(_ENTITY_BULLET) for line in lines
        ):
            continue

        entity_lines = [line for line in lines if line.startswith(_ENTITY_BULLET)]
        entities = [name for name in map(_entity_name, entity_lines) if name]
        relations = [
            rel for rel in (
                _relations(line) for line in entity_lines if _RELATION_MARKER in line
            )
            if rel
        ]
        rules = ", ".join(
            line.replace("- ", "", 1)
            for line in lines
            if line.startswith(_RULE_PREFIXES)
        )

        domains.append(
            f"### {title}\n"
            f"- **Entities:** {', '.join(entities)}\n"
            f"- **Key relations:** {', '.join(relations)}\n"
            f"- **Rules:** {rules}"
        )

    logger.debug("Domain patterns: %d domain(s) from %d chunk(s)", len(domains), len(chunks))
    return "\n\n".join(domains)


def _entity_name(line: str) -> str:
    """First bold word on a bullet line, or empty string."""
    match = _ENTITY_RE.search(line)
    return match.group(1) if match else ""


def _relations(line: str) -> str:
    """``Entity→Target`` pairs for every ``rel→Target`` on the line."""
    entity = _entity_name(line)
    return ", ".join(f"{entity}→{target}" for target in _RELATION_RE.findall(line))
