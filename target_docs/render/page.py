"""Rendering of a single target page."""

from __future__ import annotations

from typing import List

from ..constants import STUB_MARKER
from ..models import TargetDocs
from .lint import MarkdownLinter

_LINTER = MarkdownLinter()


def render_target_page(docs: TargetDocs) -> str:
    """Render the markdown page for one target."""
    metadata = docs.target.metadata
    lines: List[str] = [f"# {docs.name}", ""]

    if metadata.tier is not None:
        lines.extend([f"**Tier: {metadata.tier}**", ""])
    if metadata.description:
        lines.extend([metadata.description, ""])

    lines.extend(["## Maintainers", ""])
    if docs.maintainers:
        lines.append("This target is maintained by:")
        lines.append("")
        lines.extend(f"- {maintainer}" for maintainer in docs.maintainers)
    else:
        lines.append("This target does not have any maintainers!")
    lines.append("")

    for section in docs.sections:
        lines.extend([f"## {section.name}", ""])
        lines.append(STUB_MARKER if section.stubbed else section.content)
        lines.append("")

    if docs.footnotes:
        lines.extend(["## Footnotes", ""])
        lines.extend(f"- {note}" for note in docs.footnotes)
        lines.append("")

    if docs.target.cfgs:
        lines.extend(["## cfg", "", "| Name | Value |", "| ---- | ----- |"])
        for key, value in docs.target.cfgs:
            rendered = f"`{value}`" if value is not None else ""
            lines.append(f"| `{key}` | {rendered} |")
        lines.append("")

    return _LINTER.lint("\n".join(lines))


__all__ = ["render_target_page"]
