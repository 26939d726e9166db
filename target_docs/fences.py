"""Fenced code block tracking shared by the parser and the linter."""

from __future__ import annotations

import re
from typing import Optional

_OPEN = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_CLOSE = re.compile(r"^ {0,3}(`{3,}|~{3,})\s*$")


class FenceTracker:
    """Follows fence state line by line.

    A fence closes only on a bare run of the same character at least as
    long as the one that opened it, so ```` fences may contain ``` lines.
    """

    def __init__(self) -> None:
        self._open: Optional[str] = None

    @property
    def inside(self) -> bool:
        return self._open is not None

    def feed(self, line: str) -> bool:
        """Consume ``line``; return True if it is part of a fence (delimiters included)."""
        if self._open is not None:
            match = _CLOSE.match(line)
            if match and match.group(1)[0] == self._open[0] and len(match.group(1)) >= len(self._open):
                self._open = None
            return True
        match = _OPEN.match(line)
        if match is None:
            return False
        run = match.group(1)
        if run[0] == "`" and "`" in line[match.end():]:
            return False
        self._open = run
        return True


__all__ = ["FenceTracker"]
