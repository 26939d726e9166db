"""Loading and matching of per-target documentation files."""

from .loader import load_target_infos
from .parser import parse_sections, parse_target_info, split_frontmatter
from .patterns import check_pattern_filename, matches, pattern_filename

__all__ = [
    "check_pattern_filename",
    "load_target_infos",
    "matches",
    "parse_sections",
    "parse_target_info",
    "pattern_filename",
    "split_frontmatter",
]
