"""Shared pytest fixtures for cratefix tests — no Rust toolchain needed."""

from __future__ import annotations

from pathlib import Path

import pytest

from cratefix.config import Settings
from cratefix.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _logging():
    setup_logging()


@pytest.fixture
def rust_project(tmp_path: Path):
    """Create a minimal cargo project and return a writer for src/main.rs."""
    (tmp_path / "Cargo.toml").write_text('[package]\nname = "demo"\nversion = "0.1.0"\n')
    (tmp_path / "src").mkdir()

    def _write(source: str) -> Settings:
        (tmp_path / "src" / "main.rs").write_text(source, encoding="utf-8")
        return Settings(project_dir=tmp_path)

    return _write
