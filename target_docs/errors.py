"""Exception hierarchy shared by the target-docs pipeline."""

from __future__ import annotations

from pathlib import Path


class TargetDocsError(RuntimeError):
    """Base class for every failure reported by target-docs."""


class ParseError(TargetDocsError):
    """Raised when a target info file cannot be parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        prefix = f"{path.name}: " if path is not None else ""
        super().__init__(f"{prefix}{message}")


class PatternMismatchError(TargetDocsError):
    """Raised when a file's declared pattern differs from its filename."""


class SectionConflictError(TargetDocsError):
    """Raised when two matching files both define a section for one target."""


class FootnoteError(TargetDocsError):
    """Raised when a footnote references a target its file does not cover."""


class RustcError(TargetDocsError):
    """Raised when querying rustc fails."""


class StaleOutputError(TargetDocsError):
    """Raised in check mode when generated pages are out of date."""


__all__ = [
    "FootnoteError",
    "ParseError",
    "PatternMismatchError",
    "RustcError",
    "SectionConflictError",
    "StaleOutputError",
    "TargetDocsError",
]
