"""Glob matching of target identifiers."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from ..errors import PatternMismatchError

_WILDCARD = "*"


def matches(pattern: str, target: str) -> bool:
    """Return True when ``target`` matches ``pattern``.

    Only ``*`` is special: it matches any run of characters, including an
    empty one. Everything else, ``?`` and ``[`` included, is literal.
    """
    if _WILDCARD not in pattern:
        return pattern == target
    return _compile(pattern).fullmatch(target) is not None


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    parts = (re.escape(part) for part in pattern.split(_WILDCARD))
    return re.compile(".*".join(parts), re.DOTALL)


def pattern_filename(pattern: str) -> str:
    """Return the filename a target info file declaring ``pattern`` must use."""
    return f"{pattern}.md"


def check_pattern_filename(pattern: str, path: Path) -> None:
    """Raise PatternMismatchError unless ``path`` is named after ``pattern``."""
    expected = pattern_filename(pattern)
    if path.name != expected:
        raise PatternMismatchError(
            f"{path.name}: declared pattern {pattern!r} requires the file to be named {expected!r}"
        )


__all__ = ["check_pattern_filename", "matches", "pattern_filename"]
