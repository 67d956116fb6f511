"""
CLI commands for the consolidated reference.

Thin wrappers over ``refsync.core.use_cases``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from refsync.core.services.manifest import OUTPUT_FILE


def _resolve_root(ctx: click.Context) -> Path:
    """Resolve the repository root from context, env, or CWD."""
    from refsync.core.config.loader import ConfigError, resolve_root

    try:
        return resolve_root(ctx.obj.get("root"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.command("sync")
@click.option("--check", is_flag=True, help="Only check whether the reference is up to date.")
@click.pass_context
def sync(ctx: click.Context, check: bool) -> None:
    """Regenerate FYSO-REFERENCE.md from the skill reference files."""
    from refsync.core.use_cases.sync import run_sync

    # `refsync --check sync` means the same as `refsync sync --check`
    check = check or ctx.obj.get("check", False)

    root = _resolve_root(ctx)
    result = run_sync(root, check=check)

    if check:
        if result.up_to_date:
            click.secho(f"✅ {OUTPUT_FILE} is up to date.", fg="green")
        else:
            click.secho(
                f"❌ {OUTPUT_FILE} is OUT OF DATE. Run: refsync sync",
                fg="red",
            )
        sys.exit(result.exit_code)

    click.secho(f"✅ Synced {OUTPUT_FILE} ({result.sections} sections)", fg="green")


@click.command("sources")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def sources(ctx: click.Context, as_json: bool) -> None:
    """List the reference files behind each section."""
    from refsync.core.use_cases.sources import describe_sources

    root = _resolve_root(ctx)
    report = describe_sources(root)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    click.secho(f"📚 Reference sources: {report.root}", fg="cyan", bold=True)
    click.echo()

    for info in report.sources:
        if info.exists:
            click.secho(f"   ✓ {info.number}. {info.title}", fg="green", nl=False)
            click.echo(f"  → {info.source} ({info.size} bytes)")
        else:
            click.secho(f"   ✗ {info.number}. {info.title}", fg="red", nl=False)
            click.echo(f"  → {info.source} (not found)")

    click.echo()
    color = "green" if report.missing == 0 else "yellow"
    click.secho(
        f"   Present: {report.present}/{len(report.sources)}",
        fg=color,
        bold=True,
    )
    click.echo(f"   Digest:  {report.digest}")
    click.echo()
