"""Run the Rust toolchain and capture its diagnostics.

Two strategies exist: ``cargo check`` for the whole project (primary) and a
direct ``rustc`` compile of the single source file (fallback). Both return
text regardless of exit status; only a failure to launch is an error.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import structlog

from cratefix.exceptions import ProcessSpawnError

log = structlog.get_logger("cratefix.producer")


def _run(cmd: list[str], cwd: Path | None) -> subprocess.CompletedProcess[str]:
    """Run *cmd* to completion, raising ProcessSpawnError if it cannot start."""
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        log.warning("producer.spawn_failed", command=cmd, error=str(e))
        raise ProcessSpawnError(cmd, e.strerror or str(e)) from e
    log.debug("producer.completed", command=cmd, returncode=proc.returncode)
    return proc


def run_dependency_check(project_dir: Path, cargo: str = "cargo") -> str:
    """Run ``cargo check --message-format=plain`` and return stderr + stdout."""
    proc = _run([cargo, "check", "--message-format=plain"], cwd=project_dir)
    return f"{proc.stderr}\n{proc.stdout}"


def run_direct_compile_check(
    source_path: Path,
    rustc: str = "rustc",
    project_dir: Path | None = None,
) -> str:
    """Compile *source_path* as a standalone binary crate and return stderr."""
    cmd = [rustc, "--error-format=human", "--crate-type=bin", str(source_path)]
    proc = _run(cmd, cwd=project_dir)
    return proc.stderr


@dataclass(frozen=True)
class DiagnosticProducer:
    """A named way of obtaining diagnostic text."""

    stage: str  # "cargo-check" | "rustc"
    produce: Callable[[], str]
