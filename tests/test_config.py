"""Tests for Settings."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from cratefix.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.project_dir == Path(".")
        assert s.source_path == Path("src/main.rs")
        assert s.cargo == "cargo"
        assert s.rustc == "rustc"

    def test_from_env_defaults(self):
        env_to_remove = ["CRATEFIX_PROJECT_DIR", "CRATEFIX_SOURCE", "CRATEFIX_CARGO", "CRATEFIX_RUSTC"]
        with patch.dict(os.environ, {}, clear=False):
            for k in env_to_remove:
                os.environ.pop(k, None)
            assert Settings.from_env() == Settings()

    def test_from_env(self):
        env = {"CRATEFIX_PROJECT_DIR": "/work/demo", "CRATEFIX_RUSTC": "rustc-1.80"}
        with patch.dict(os.environ, env):
            s = Settings.from_env()
        assert s.project_dir == Path("/work/demo")
        assert s.rustc == "rustc-1.80"

    def test_override_skips_none(self):
        s = Settings().override(cargo="my-cargo", rustc=None)
        assert s.cargo == "my-cargo"
        assert s.rustc == "rustc"

    def test_resolved_source_relative(self, tmp_path: Path):
        s = Settings(project_dir=tmp_path)
        assert s.resolved_source() == tmp_path / "src" / "main.rs"

    def test_resolved_source_absolute(self, tmp_path: Path):
        src = tmp_path / "other.rs"
        s = Settings(project_dir=Path("/elsewhere"), source_path=src)
        assert s.resolved_source() == src
