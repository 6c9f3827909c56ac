"""Extract crate names from ``use`` declarations."""

from __future__ import annotations

import re
from pathlib import Path

import structlog

from cratefix.allowlist import is_reserved
from cratefix.exceptions import SourceReadError

log = structlog.get_logger("cratefix.extractor")

# First path segment of a line-leading ``use`` declaration.
# Stops at the first non-identifier character (``::``, ``{``, ``;``).
_USE_RE = re.compile(r"^use\s+([a-zA-Z_][a-zA-Z0-9_]*)", re.MULTILINE)


def extract_imports(source_text: str) -> list[str]:
    """Return the sorted, de-duplicated external crate names used in *source_text*."""
    crates: set[str] = set()
    for m in _USE_RE.finditer(source_text):
        name = m.group(1)
        if is_reserved(name):
            continue
        crates.add(name)
    return sorted(crates)


def extract_crates_from_source(source_path: Path) -> list[str]:
    """Read *source_path* as UTF-8 and extract crate names from it.

    Raises:
        SourceReadError: the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        content = source_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceReadError(str(source_path), f"invalid UTF-8: {e}") from e
    except OSError as e:
        raise SourceReadError(str(source_path), e.strerror or str(e)) from e

    crates = extract_imports(content)
    log.debug("extractor.scanned", source=str(source_path), crates=crates)
    return crates
