"""Reads a directory of target info files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..errors import ParseError, TargetDocsError
from ..logging import get_logger
from ..models import TargetInfoFile
from .parser import parse_target_info
from .patterns import check_pattern_filename

_LOGGER = get_logger("infos")


def load_target_infos(directory: Path) -> List[TargetInfoFile]:
    """Parse every ``*.md`` file in ``directory`` in sorted filename order."""
    if not directory.is_dir():
        raise TargetDocsError(f"Target info directory not found: {directory}")

    infos: List[TargetInfoFile] = []
    for path in sorted(directory.glob("*.md")):
        if not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"not valid UTF-8: {exc}", path=path) from exc
        except OSError as exc:
            raise TargetDocsError(f"Cannot read {path}: {exc}") from exc
        info = parse_target_info(text, path)
        check_pattern_filename(info.pattern, path)
        _LOGGER.debug(
            "Loaded %s (%d sections, %d maintainers)",
            path.name,
            len(info.sections),
            len(info.maintainers),
        )
        infos.append(info)

    _LOGGER.info("Loaded %d target info files from %s", len(infos), directory)
    return infos


__all__ = ["load_target_infos"]
