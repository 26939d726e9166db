"""Shared constants for target page sections and stubs."""

from __future__ import annotations

SECTIONS: tuple[str, ...] = (
    "Overview",
    "Requirements",
    "Testing",
    "Building the target",
    "Cross compilation",
    "Building Rust programs",
)

STUB_MARKER = "Unknown."

GENERATED_HEADER = "<!-- target-docs:generated -->"

INDEX_FILENAME = "platform-support.md"
SUMMARY_FILENAME = "SUMMARY.md"


__all__ = ["GENERATED_HEADER", "INDEX_FILENAME", "SECTIONS", "STUB_MARKER", "SUMMARY_FILENAME"]
