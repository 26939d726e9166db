"""Platform-support index and mdBook SUMMARY entries."""

from __future__ import annotations

from itertools import groupby
from typing import List, Optional, Sequence

from ..models import TargetDocs
from .lint import MarkdownLinter

_LINTER = MarkdownLinter()


def _tier_key(docs: TargetDocs) -> tuple[int, str]:
    tier = docs.target.metadata.tier
    return (tier if tier is not None else 99, docs.name)


def _tier_heading(tier: Optional[int]) -> str:
    return f"## Tier {tier}" if tier is not None else "## Unknown tier"


def _flag(value: Optional[bool]) -> str:
    if value is None:
        return "?"
    return "✓" if value else ""


def render_index(
    docs_list: Sequence[TargetDocs], *, title: str = "Platform Support", link_prefix: str = ""
) -> str:
    """Render a table of every target, grouped by tier, linking to its page."""
    lines: List[str] = [f"# {title}", ""]
    ordered = sorted(docs_list, key=_tier_key)
    for tier, group in groupby(ordered, key=lambda docs: docs.target.metadata.tier):
        lines.extend(
            [
                _tier_heading(tier),
                "",
                "| Target | std | host | Notes |",
                "| ------ | --- | ---- | ----- |",
            ]
        )
        for docs in group:
            metadata = docs.target.metadata
            link = f"[`{docs.name}`]({link_prefix}{docs.name}.md)"
            notes = metadata.description or ""
            lines.append(f"| {link} | {_flag(metadata.std)} | {_flag(metadata.host_tools)} | {notes} |")
        lines.append("")
    if not docs_list:
        lines.append("No targets were documented.")
    return _LINTER.lint("\n".join(lines))


def render_summary(docs_list: Sequence[TargetDocs], *, prefix: str = "") -> str:
    """Render mdBook SUMMARY list entries, one per target page."""
    entries = [
        f"- [{docs.name}]({prefix}{docs.name}.md)"
        for docs in sorted(docs_list, key=lambda docs: docs.name)
    ]
    return "\n".join(entries) + "\n" if entries else ""


__all__ = ["render_index", "render_summary"]
