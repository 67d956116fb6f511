"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from refsync.core.services.manifest import SECTIONS

DOMAIN_PATTERNS_SOURCE = "skills/fyso-plan/reference/domain-patterns.md"

DOMAIN_PATTERNS_MD = textwrap.dedent("""\
    # Domain Patterns

    Reference entity layouts for common business domains.

    ## Domain Selection Guide

    - **Tip** pick the closest domain first

    ## Retail Store

    ### Entities
    - **productos** — nombre, precio, stock
    - **ventas** — fecha, total, rel→clientes
    - **lineas_venta** — cantidad, rel→ventas, rel→productos

    ### Rules
    - Compute: subtotal = cantidad * precio
    - Validate: stock >= 0
    - Transform: nombre uppercase

    ## Clinic

    - **pacientes** — nombre, email
    - **turnos** — fecha, rel→pacientes

    ## Universal Fields

    - **created_at** — timestamp

    ## Notes

    Plain prose with no entities.
""")


def _write_sources(root: Path, skip: tuple[str, ...] = ()) -> None:
    """Create every manifest source under ``root`` except those in ``skip``."""
    for section in SECTIONS:
        if section.source in skip:
            continue
        path = root / section.source
        path.parent.mkdir(parents=True, exist_ok=True)
        if section.source == DOMAIN_PATTERNS_SOURCE:
            path.write_text(DOMAIN_PATTERNS_MD, encoding="utf-8")
        else:
            path.write_text(f"# {section.title}\n\nLong-form reference.\n", encoding="utf-8")


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A repository root with all eight reference sources present."""
    root = tmp_path / "repo"
    root.mkdir()
    _write_sources(root)
    return root


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """A repository root with no reference sources at all."""
    root = tmp_path / "empty"
    root.mkdir()
    return root


@pytest.fixture
def make_repo(tmp_path: Path):
    """Factory: a repository root with every source except those in ``skip``."""

    def _make(name: str = "partial", skip: tuple[str, ...] = ()) -> Path:
        root = tmp_path / name
        root.mkdir()
        _write_sources(root, skip=skip)
        return root

    return _make


@pytest.fixture
def domain_patterns_md() -> str:
    """Sample domain patterns source document."""
    return DOMAIN_PATTERNS_MD
