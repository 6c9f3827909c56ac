"""CLI entry point: cratefix.

Subcommands:
    cratefix                      # same as `cratefix fix`
    cratefix fix                  # scan, check, and cargo add what is missing
    cratefix scan                 # list crates named in use statements only
    cratefix analyze errors.txt   # extract missing crates from saved diagnostics
"""

from __future__ import annotations

import platform
from pathlib import Path

import click

from cratefix.config import Settings
from cratefix.core.logging import setup_logging
from cratefix.driver import RemediationDriver, print_crate_list, print_findings
from cratefix.exceptions import SourceReadError
from cratefix.extractor import extract_crates_from_source
from cratefix.matcher import extract_missing

_OS_NAMES = {"darwin": "macos"}


def host_os() -> str:
    """Short lower-case name of the host OS, e.g. linux, macos, windows."""
    system = platform.system().lower()
    return _OS_NAMES.get(system, system)


def _banner(settings: Settings) -> str:
    source = settings.source_path
    if not source.is_absolute():
        source = settings.project_dir.resolve() / source
    return f"PATH for {host_os()}: {source}"


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option("--project-dir", type=click.Path(file_okay=False), default=None,
              help="Rust project root (default: $CRATEFIX_PROJECT_DIR or .)")
@click.option("--source", default=None,
              help="Source file relative to the project root (default: src/main.rs)")
@click.option("--cargo", default=None, help="cargo executable")
@click.option("--rustc", default=None, help="rustc executable")
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    project_dir: str | None,
    source: str | None,
    cargo: str | None,
    rustc: str | None,
) -> None:
    """cratefix: find crates a Rust source file needs and cargo add them."""
    setup_logging(verbose)
    ctx.obj = Settings.from_env().override(
        project_dir=Path(project_dir) if project_dir else None,
        source_path=Path(source) if source else None,
        cargo=cargo,
        rustc=rustc,
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(fix)


@main.command("fix")
@click.pass_obj
def fix(settings: Settings) -> None:
    """Scan use statements and compiler errors, then install missing crates."""
    click.echo(_banner(settings))
    RemediationDriver(settings).run()


@main.command("scan")
@click.pass_obj
def scan(settings: Settings) -> None:
    """List external crates named in the source file's use statements."""
    try:
        crates = extract_crates_from_source(settings.resolved_source())
    except SourceReadError as e:
        click.echo(f"Error reading source file: {e}", err=True)
        return
    if not crates:
        click.echo("No external crates found in use statements.")
        return
    click.echo("Crates found in use statements:")
    print_crate_list(crates)


@main.command("analyze")
@click.argument("diagnostic_file", default="-")
def analyze(diagnostic_file: str) -> None:
    """Extract missing crates from saved cargo/rustc output (file or stdin)."""
    try:
        with click.open_file(diagnostic_file, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        click.echo(f"Error reading diagnostic file: {e}", err=True)
        return
    print_findings(extract_missing(text))


if __name__ == "__main__":
    main()
