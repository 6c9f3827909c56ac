"""Runtime settings — defaults overridable via environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

DEFAULT_SOURCE = "src/main.rs"


@dataclass(frozen=True)
class Settings:
    """Where the Rust project lives and which toolchain binaries to call."""

    project_dir: Path = field(default_factory=lambda: Path("."))
    source_path: Path = field(default_factory=lambda: Path(DEFAULT_SOURCE))
    cargo: str = "cargo"
    rustc: str = "rustc"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment.

        Reads:
            CRATEFIX_PROJECT_DIR — project root (default: current directory)
            CRATEFIX_SOURCE      — source file relative to the root (default: src/main.rs)
            CRATEFIX_CARGO       — cargo executable (default: cargo)
            CRATEFIX_RUSTC       — rustc executable (default: rustc)
        """
        return cls(
            project_dir=Path(os.environ.get("CRATEFIX_PROJECT_DIR", ".")),
            source_path=Path(os.environ.get("CRATEFIX_SOURCE", DEFAULT_SOURCE)),
            cargo=os.environ.get("CRATEFIX_CARGO", "cargo"),
            rustc=os.environ.get("CRATEFIX_RUSTC", "rustc"),
        )

    def override(self, **changes: object) -> Settings:
        """Return a copy with every non-None value in *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def resolved_source(self) -> Path:
        if self.source_path.is_absolute():
            return self.source_path
        return self.project_dir / self.source_path
