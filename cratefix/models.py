"""Data models for the remediation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InstallOutcome:
    """Result of one ``cargo add`` invocation."""

    crate_name: str
    status: str  # "installed" | "failed" | "spawn_error"
    detail: str = ""  # trimmed stderr or spawn error message

    @property
    def ok(self) -> bool:
        return self.status == "installed"


@dataclass
class StageResult:
    """What a single pipeline stage found and did."""

    stage: str  # "source" | "cargo-check" | "rustc"
    crates: list[str] = field(default_factory=list)
    error: str | None = None
    installs: list[InstallOutcome] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class RemediationReport:
    """Summary of a full driver run, stages in execution order."""

    stages: list[StageResult] = field(default_factory=list)

    def stage(self, name: str) -> StageResult | None:
        for s in self.stages:
            if s.stage == name:
                return s
        return None

    @property
    def source_crates(self) -> list[str]:
        s = self.stage("source")
        return s.crates if s else []

    @property
    def diagnostic_crates(self) -> list[str]:
        for name in ("cargo-check", "rustc"):
            s = self.stage(name)
            if s is not None and not s.failed:
                return s.crates
        return []

    @property
    def used_fallback(self) -> bool:
        return self.stage("rustc") is not None

    @property
    def installs(self) -> list[InstallOutcome]:
        return [o for s in self.stages for o in s.installs]
