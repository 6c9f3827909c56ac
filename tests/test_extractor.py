"""Tests for static extraction of crate names from use statements."""

from __future__ import annotations

from pathlib import Path

import pytest

from cratefix.exceptions import CrateFixError, SourceReadError
from cratefix.extractor import extract_crates_from_source, extract_imports


# ── extract_imports ──────────────────────────────────────────────────────


class TestExtractImports:
    def test_filters_std(self):
        assert extract_imports("use regex::Regex;\nuse std::fs;\n") == ["regex"]

    def test_no_use_lines(self):
        assert extract_imports("fn main() {\n    println!(\"hi\");\n}\n") == []

    def test_empty_text(self):
        assert extract_imports("") == []

    def test_sorted_and_deduplicated(self):
        src = "use tokio::runtime;\nuse serde::Serialize;\nuse tokio::sync::Mutex;\n"
        assert extract_imports(src) == ["serde", "tokio"]

    def test_brace_group_takes_root(self):
        assert extract_imports("use serde::{Deserialize, Serialize};\n") == ["serde"]

    def test_bare_crate_with_semicolon(self):
        assert extract_imports("use anyhow;\n") == ["anyhow"]

    def test_self_super_crate_filtered(self):
        src = "use self::inner;\nuse super::parent;\nuse crate::config::Settings;\n"
        assert extract_imports(src) == []

    def test_core_and_alloc_filtered(self):
        assert extract_imports("use core::mem;\nuse alloc::vec::Vec;\n") == []

    def test_must_start_at_line_beginning(self):
        src = "    use rand::Rng;\n// use log::info;\npub use chrono::Utc;\n"
        assert extract_imports(src) == []

    def test_requires_whitespace_after_keyword(self):
        assert extract_imports("user_data::load();\nuses foo;\n") == []

    def test_identifier_with_digits_and_underscores(self):
        assert extract_imports("use sha2::Sha256;\nuse _private_dep::X;\n") == [
            "_private_dep",
            "sha2",
        ]

    def test_leading_colons_not_matched(self):
        assert extract_imports("use ::serde::Serialize;\n") == []

    def test_crlf_line_endings(self):
        assert extract_imports("use regex::Regex;\r\nuse clap::Parser;\r\n") == [
            "clap",
            "regex",
        ]


# ── extract_crates_from_source ───────────────────────────────────────────


class TestExtractCratesFromSource:
    def test_reads_file(self, tmp_path: Path):
        src = tmp_path / "main.rs"
        src.write_text("use regex::Regex;\nuse std::fs;\n", encoding="utf-8")
        assert extract_crates_from_source(src) == ["regex"]

    def test_only_std_yields_empty(self, tmp_path: Path):
        src = tmp_path / "main.rs"
        src.write_text("use std::fs;\n", encoding="utf-8")
        assert extract_crates_from_source(src) == []

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SourceReadError) as exc_info:
            extract_crates_from_source(tmp_path / "nope.rs")
        assert isinstance(exc_info.value, CrateFixError)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert "nope.rs" in str(exc_info.value)

    def test_invalid_utf8(self, tmp_path: Path):
        src = tmp_path / "main.rs"
        src.write_bytes(b"use regex::Regex;\n\xff\xfe\n")
        with pytest.raises(SourceReadError) as exc_info:
            extract_crates_from_source(src)
        assert "invalid UTF-8" in exc_info.value.reason

    def test_directory_instead_of_file(self, tmp_path: Path):
        with pytest.raises(SourceReadError):
            extract_crates_from_source(tmp_path)
