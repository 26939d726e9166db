"""Assembly and rendering of target pages."""

from .assemble import AssemblyResult, assemble_all, assemble_target, check_footnotes
from .index import render_index, render_summary
from .lint import MarkdownLinter
from .page import render_target_page

__all__ = [
    "AssemblyResult",
    "MarkdownLinter",
    "assemble_all",
    "assemble_target",
    "check_footnotes",
    "render_index",
    "render_summary",
    "render_target_page",
]
