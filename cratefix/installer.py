"""Install missing crates with ``cargo add``, one at a time."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

import click
import structlog

from cratefix.models import InstallOutcome

log = structlog.get_logger("cratefix.installer")


def install(
    crate_names: Sequence[str],
    cargo: str = "cargo",
    project_dir: Path | None = None,
) -> list[InstallOutcome]:
    """Run ``cargo add <name>`` for each crate, reporting as it goes.

    Every crate is attempted even when an earlier one fails. Never raises
    for subprocess failures; the outcomes are returned for inspection.
    """
    outcomes: list[InstallOutcome] = []
    for name in crate_names:
        click.echo(f"Installing {name}...")
        outcomes.append(_install_one(name, cargo, project_dir))
    return outcomes


def _install_one(name: str, cargo: str, project_dir: Path | None) -> InstallOutcome:
    try:
        proc = subprocess.run(
            [cargo, "add", name],
            cwd=project_dir,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        log.warning("installer.spawn_failed", crate=name, error=str(e))
        click.echo(f"✗ Error running cargo add for {name}: {e}")
        return InstallOutcome(crate_name=name, status="spawn_error", detail=str(e))

    if proc.returncode == 0:
        log.info("installer.installed", crate=name)
        click.echo(f"✓ Successfully installed {name}")
        return InstallOutcome(crate_name=name, status="installed")

    detail = proc.stderr.strip()
    log.info("installer.failed", crate=name, returncode=proc.returncode)
    click.echo(f"✗ Failed to install {name}: {detail}")
    return InstallOutcome(crate_name=name, status="failed", detail=detail)
