"""Frontmatter and section extraction for target info files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from ..constants import SECTIONS
from ..errors import ParseError
from ..fences import FenceTracker
from ..models import TargetInfoFile

_DELIMITER = "---"
_ALLOWED_KEYS = {"pattern", "maintainers", "footnotes"}


def split_frontmatter(text: str, *, path: Path | None = None) -> Tuple[Dict[str, Any], str]:
    """Split a document into its YAML frontmatter mapping and markdown body."""
    lines = text.replace("\r\n", "\n").split("\n")
    if not lines or lines[0].strip() != _DELIMITER:
        raise ParseError("missing frontmatter: file must start with '---'", path=path)

    for index in range(1, len(lines)):
        if lines[index].strip() == _DELIMITER:
            break
    else:
        raise ParseError("unterminated frontmatter block", path=path)

    raw = "\n".join(lines[1:index])
    try:
        loaded = yaml.safe_load(raw) if raw.strip() else {}
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid frontmatter: {exc}", path=path) from exc
    if not isinstance(loaded, dict):
        raise ParseError("frontmatter must be a mapping", path=path)

    body = "\n".join(lines[index + 1 :])
    return loaded, body


def parse_sections(body: str, *, path: Path | None = None) -> Dict[str, str]:
    """Parse a markdown body into ``{section name: content}`` in document order."""
    sections: Dict[str, List[str]] = {}
    current: List[str] | None = None
    fences = FenceTracker()

    for line_no, line in enumerate(body.split("\n"), start=1):
        stripped = line.strip()
        in_fence = fences.feed(line)
        if not in_fence and line.startswith("## "):
            name = line[3:].strip()
            if name not in SECTIONS:
                raise ParseError(
                    f"unknown section {name!r} on body line {line_no}; "
                    f"expected one of: {', '.join(SECTIONS)}",
                    path=path,
                )
            if name in sections:
                raise ParseError(f"section {name!r} is defined more than once", path=path)
            current = sections[name] = []
            continue
        if not in_fence and (line.startswith("# ") or line.rstrip() == "#"):
            raise ParseError(
                f"top-level heading on body line {line_no}; the page title is generated",
                path=path,
            )

        if current is None:
            if stripped:
                raise ParseError(
                    f"content before the first section on body line {line_no}", path=path
                )
            continue
        current.append(line)

    return {name: "\n".join(lines).strip() for name, lines in sections.items()}


def parse_target_info(text: str, path: Path) -> TargetInfoFile:
    """Parse one target info document."""
    frontmatter, body = split_frontmatter(text, path=path)

    unknown = sorted(set(frontmatter) - _ALLOWED_KEYS)
    if unknown:
        raise ParseError(f"unknown frontmatter keys: {', '.join(unknown)}", path=path)

    pattern = frontmatter.get("pattern")
    if not isinstance(pattern, str) or not pattern.strip():
        raise ParseError("frontmatter 'pattern' must be a non-empty string", path=path)

    return TargetInfoFile(
        path=path,
        pattern=pattern.strip(),
        maintainers=_string_list(frontmatter.get("maintainers"), "maintainers", path),
        footnotes=_footnotes(frontmatter.get("footnotes"), path),
        sections=parse_sections(body, path=path),
    )


def _string_list(value: Any, key: str, path: Path) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ParseError(f"frontmatter {key!r} must be a list of strings", path=path)
    return [item.strip() for item in value]


def _footnotes(value: Any, path: Path) -> Dict[str, List[str]]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ParseError("frontmatter 'footnotes' must map target names to lists", path=path)
    footnotes: Dict[str, List[str]] = {}
    for target, notes in value.items():
        footnotes[str(target)] = _string_list(notes, f"footnotes.{target}", path)
    return footnotes


__all__ = ["parse_sections", "parse_target_info", "split_frontmatter"]
