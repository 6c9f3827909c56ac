"""Diagnostic pattern matching — find missing crates in compiler output.

Each rule targets one phrasing of a rustc diagnostic. All rules run against
the full text and their hits are unioned, so a crate reported by several
messages appears once in the result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import structlog

from cratefix.allowlist import is_reserved

log = structlog.get_logger("cratefix.matcher")


@dataclass(frozen=True)
class MatchRule:
    """A diagnostic pattern with exactly one capture group (the crate name)."""

    name: str
    pattern: re.Pattern[str]
    # Drop captures containing ``::``. When False the pattern itself already
    # captures only the leading path segment.
    reject_qualified: bool = True


# Ordered by the diagnostic they target, not by priority; every rule runs.
MATCH_RULES: tuple[MatchRule, ...] = (
    MatchRule(
        "undeclared-crate",
        re.compile(r"use of undeclared crate or module `([^`]+)`"),
    ),
    MatchRule(
        "failed-to-resolve",
        re.compile(r"failed to resolve: use of undeclared crate or module `([^`]+)`"),
    ),
    # ``[^`:]`` refuses qualified paths outright: `bar::baz` never matches.
    MatchRule(
        "unresolved-import",
        re.compile(r"unresolved import `([^`:]+)`"),
    ),
    MatchRule(
        "no-external-crate",
        re.compile(r"no external crate `([^`]+)`"),
    ),
    MatchRule(
        "extern-crate-not-found",
        re.compile(r"extern crate `([^`]+)` not found"),
    ),
    MatchRule(
        "maybe-missing-crate",
        re.compile(r"maybe a missing crate `([^`]+)`\?"),
    ),
    MatchRule(
        "consider-extern-crate",
        re.compile(r"consider adding `extern crate ([^;`]+);`"),
    ),
    # Takes the segment before the first ``::`` of the suggested path.
    MatchRule(
        "consider-importing",
        re.compile(r"help: consider importing this.*?`([^`:]+)::"),
        reject_qualified=False,
    ),
)


def _accept(rule: MatchRule, name: str) -> bool:
    if is_reserved(name):
        return False
    if rule.reject_qualified and "::" in name:
        return False
    return True


def extract_missing(diagnostic_text: str) -> list[str]:
    """Return sorted crate names that *diagnostic_text* reports as missing.

    Never raises; no matches is an empty list.
    """
    missing: set[str] = set()
    for rule in MATCH_RULES:
        for m in rule.pattern.finditer(diagnostic_text):
            name = m.group(1)
            if _accept(rule, name):
                log.debug("matcher.rule_hit", rule=rule.name, crate=name)
                missing.add(name)
    return sorted(missing)
