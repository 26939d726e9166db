"""Merges matching target info files into per-target page models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..constants import SECTIONS
from ..errors import FootnoteError, SectionConflictError
from ..infos.patterns import matches
from ..models import ResolvedSection, Target, TargetDocs, TargetInfoFile


@dataclass
class AssemblyResult:
    """Assembled pages plus the patterns that matched no target."""

    docs: List[TargetDocs]
    unmatched_patterns: List[str] = field(default_factory=list)


def assemble_target(target: Target, infos: Sequence[TargetInfoFile]) -> TargetDocs:
    """Merge every info file matching ``target``; stub sections nobody documents.

    ``infos`` are visited in the order given. A section defined by two
    matching files is an error rather than a silent override.
    """
    contents: Dict[str, str] = {}
    owners: Dict[str, Path] = {}
    maintainers: List[str] = []
    footnotes: List[str] = []
    sources: List[Path] = []

    for info in infos:
        if not matches(info.pattern, target.name):
            continue
        sources.append(info.path)
        for name, content in info.sections.items():
            if name in owners:
                raise SectionConflictError(
                    f"target {target.name!r} has section {name!r} in both "
                    f"{owners[name].name} and {info.path.name}"
                )
            owners[name] = info.path
            contents[name] = content
        for maintainer in info.maintainers:
            if maintainer not in maintainers:
                maintainers.append(maintainer)
        footnotes.extend(info.footnotes.get(target.name, []))

    sections = [ResolvedSection(name=name, content=contents.get(name)) for name in SECTIONS]
    return TargetDocs(
        target=target,
        sections=sections,
        maintainers=maintainers,
        footnotes=footnotes,
        sources=sources,
    )


def assemble_all(targets: Iterable[Target], infos: Sequence[TargetInfoFile]) -> AssemblyResult:
    """Assemble pages for all targets, sorted by name."""
    ordered = sorted(targets, key=lambda target: target.name)
    check_footnotes(infos)

    docs = [assemble_target(target, infos) for target in ordered]
    used = {source for page in docs for source in page.sources}
    unmatched = [info.pattern for info in infos if info.path not in used]
    return AssemblyResult(docs=docs, unmatched_patterns=unmatched)


def check_footnotes(infos: Sequence[TargetInfoFile]) -> None:
    """Raise FootnoteError for footnotes keyed by a target the file cannot match."""
    for info in infos:
        for target_name in info.footnotes:
            if not matches(info.pattern, target_name):
                raise FootnoteError(
                    f"{info.path.name}: footnote target {target_name!r} "
                    f"is not matched by pattern {info.pattern!r}"
                )


__all__ = ["AssemblyResult", "assemble_all", "assemble_target", "check_footnotes"]
