"""Whitespace normalisation for generated markdown."""

from __future__ import annotations

import re
from typing import List

from ..fences import FenceTracker

_HEADING = re.compile(r"^#{1,6}(?:\s|$)")


class MarkdownLinter:
    """Normalises line endings, blank lines and heading spacing outside code fences."""

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        cleaned: List[str] = []
        fences = FenceTracker()
        previous_blank = False

        for line in normalized.split("\n"):
            stripped = line.rstrip()
            if fences.feed(stripped):
                cleaned.append(stripped)
                previous_blank = False
                continue

            if _HEADING.match(stripped) and cleaned and cleaned[-1] != "":
                cleaned.append("")
            if not stripped:
                if previous_blank or not cleaned:
                    continue
                previous_blank = True
                cleaned.append("")
                continue

            cleaned.append(stripped)
            previous_blank = False

        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"


__all__ = ["MarkdownLinter"]
