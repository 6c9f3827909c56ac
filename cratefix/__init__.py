"""cratefix: detect and install crates missing from a Rust project."""

__version__ = "0.1.0"

from cratefix.allowlist import STD_MODULES, is_reserved
from cratefix.config import Settings
from cratefix.driver import RemediationDriver
from cratefix.exceptions import CrateFixError, ProcessSpawnError, SourceReadError
from cratefix.extractor import extract_crates_from_source, extract_imports
from cratefix.installer import install
from cratefix.matcher import MATCH_RULES, MatchRule, extract_missing
from cratefix.models import InstallOutcome, RemediationReport, StageResult
from cratefix.producers import run_dependency_check, run_direct_compile_check

__all__ = [
    "CrateFixError",
    "InstallOutcome",
    "MATCH_RULES",
    "MatchRule",
    "ProcessSpawnError",
    "RemediationDriver",
    "RemediationReport",
    "STD_MODULES",
    "Settings",
    "SourceReadError",
    "StageResult",
    "extract_crates_from_source",
    "extract_imports",
    "extract_missing",
    "install",
    "is_reserved",
    "run_dependency_check",
    "run_direct_compile_check",
]
