"""Remediation driver — static extraction, diagnostics, and ``cargo add``.

Stages run in a fixed order and never abort the run:

    source       → crates named in ``use`` lines, installed right away
    cargo-check  → crates reported missing by ``cargo check``, installed
    rustc        → only if cargo could not be launched; reported, not installed

The two discovery stages are reported and remediated independently, so a
crate found by both is listed (and attempted) twice.
"""

from __future__ import annotations

from typing import Callable, Sequence

import click
import structlog

from cratefix.config import Settings
from cratefix.exceptions import ProcessSpawnError, SourceReadError
from cratefix.extractor import extract_crates_from_source
from cratefix.installer import install
from cratefix.matcher import extract_missing
from cratefix.models import InstallOutcome, RemediationReport, StageResult
from cratefix.producers import (
    DiagnosticProducer,
    run_dependency_check,
    run_direct_compile_check,
)

log = structlog.get_logger("cratefix.driver")

Installer = Callable[..., list[InstallOutcome]]


def print_crate_list(crates: Sequence[str]) -> None:
    for name in crates:
        click.echo(f"  - {name}")


def print_findings(crates: Sequence[str], suggestions: bool = True) -> None:
    """Print what the matcher found, optionally with manifest/command hints."""
    if not crates:
        click.echo("No missing crates found!")
        return

    click.echo("Missing crates that need to be installed:")
    print_crate_list(crates)
    if not suggestions:
        return

    click.echo("\nTo install these crates, add them to your Cargo.toml:")
    click.echo("[dependencies]")
    for name in crates:
        click.echo(f'{name} = "*"')

    click.echo("\nOr run these commands:")
    for name in crates:
        click.echo(f"cargo add {name}")


class RemediationDriver:
    """Run the whole find-and-fix pipeline against one Rust project."""

    def __init__(self, settings: Settings, installer: Installer = install) -> None:
        self._settings = settings
        self._installer = installer
        self.primary = DiagnosticProducer(
            stage="cargo-check",
            produce=lambda: run_dependency_check(settings.project_dir, settings.cargo),
        )
        self.fallback = DiagnosticProducer(
            stage="rustc",
            produce=lambda: run_direct_compile_check(
                settings.resolved_source(), settings.rustc, settings.project_dir
            ),
        )

    def run(self) -> RemediationReport:
        report = RemediationReport()
        click.echo(f"Analyzing missing crates in {self._settings.source_path.name}...\n")

        report.stages.append(self._source_stage())

        diagnostics = self._diagnostic_stage(self.primary, remediate=True)
        report.stages.append(diagnostics)
        if diagnostics.failed:
            click.echo(f"Error analyzing crates: {diagnostics.error}", err=True)
            click.echo("\nTrying alternative method with rustc...")
            fallback = self._diagnostic_stage(self.fallback, remediate=False)
            report.stages.append(fallback)
            if fallback.failed:
                click.echo(f"Alternative method also failed: {fallback.error}", err=True)

        log.info(
            "driver.finished",
            source_crates=report.source_crates,
            diagnostic_crates=report.diagnostic_crates,
            used_fallback=report.used_fallback,
        )
        return report

    # ── stages ───────────────────────────────────────────────────────────

    def _source_stage(self) -> StageResult:
        result = StageResult(stage="source")
        source = self._settings.resolved_source()
        try:
            result.crates = extract_crates_from_source(source)
        except SourceReadError as e:
            log.warning("extractor.read_failed", source=str(source), error=e.reason)
            click.echo(f"Error reading source file: {e}", err=True)
            result.error = str(e)
            return result

        if not result.crates:
            return result

        click.echo("Crates found in use statements:")
        print_crate_list(result.crates)
        click.echo("\nAttempting to install crates...")
        result.installs = self._install(result.crates)
        click.echo()
        return result

    def _diagnostic_stage(self, producer: DiagnosticProducer, remediate: bool) -> StageResult:
        result = StageResult(stage=producer.stage)
        try:
            text = producer.produce()
        except ProcessSpawnError as e:
            result.error = str(e)
            return result

        result.crates = extract_missing(text)
        print_findings(result.crates, suggestions=remediate)

        if remediate and result.crates:
            click.echo("Additional missing crates found from compilation errors:")
            print_crate_list(result.crates)
            click.echo("\nAttempting to install additional crates...")
            result.installs = self._install(result.crates)
        return result

    def _install(self, crates: list[str]) -> list[InstallOutcome]:
        return self._installer(
            crates, cargo=self._settings.cargo, project_dir=self._settings.project_dir
        )
