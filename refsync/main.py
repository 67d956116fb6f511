"""
refsync — CLI entrypoint.

Usage:
    refsync                  # regenerate FYSO-REFERENCE.md
    refsync --check          # exit 1 if FYSO-REFERENCE.md is stale
    refsync sync [--check]
    refsync sources [--json]
    python -m refsync.main --help
"""

from __future__ import annotations

import click

from refsync import __version__
from refsync.core.observability.logging_config import resolve_level, setup_logging_from_env


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="refsync")
@click.option("--check", is_flag=True, help="Check that the reference is up to date.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--root",
    "root",
    type=click.Path(exists=False, file_okay=False),
    default=None,
    help="Repository root (default: $REFSYNC_ROOT or auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    check: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
    root: str | None,
) -> None:
    """refsync — keep the consolidated Fyso reference in sync with its sources."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["root"] = root
    ctx.obj["check"] = check

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    if check and ctx.invoked_subcommand not in (None, "sync"):
        raise click.UsageError(f"--check does not apply to '{ctx.invoked_subcommand}'.")

    if ctx.invoked_subcommand is None:
        ctx.invoke(sync, check=check)


# ── Register commands from refsync/ui/cli/ ──────────────────────

from refsync.ui.cli.reference import sources, sync

cli.add_command(sync)
cli.add_command(sources)


if __name__ == "__main__":
    cli()
