"""Pipeline orchestration for generate/check/validate flows."""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List

from .config import TargetDocsConfig, load_config
from .constants import GENERATED_HEADER, INDEX_FILENAME, SUMMARY_FILENAME
from .errors import StaleOutputError, TargetDocsError
from .infos import load_target_infos, matches
from .logging import get_logger
from .models import Target, TargetInfoFile
from .render import (
    assemble_all,
    check_footnotes,
    render_index,
    render_summary,
    render_target_page,
)
from .rustc import RustcInfo


class Mode(str, Enum):
    """What to do with freshly rendered pages."""

    WRITE = "write"
    DRY_RUN = "dry-run"
    CHECK = "check"


@dataclass
class GenerateOutcome:
    """Result of a generation run."""

    output_dir: Path
    mode: Mode
    changed: List[Path] = field(default_factory=list)
    removed: List[Path] = field(default_factory=list)
    diff: str = ""
    target_count: int = 0
    stubbed_sections: int = 0
    unmatched_patterns: List[str] = field(default_factory=list)

    @property
    def up_to_date(self) -> bool:
        return not self.changed and not self.removed


@dataclass
class ValidationReport:
    """Outcome of ``validate``: per-pattern match counts when targets are known."""

    infos: List[TargetInfoFile]
    match_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def unmatched_patterns(self) -> List[str]:
        return [pattern for pattern, count in self.match_counts.items() if count == 0]


class Generator:
    """Coordinates loading, assembling and writing target pages."""

    def __init__(self, rustc: RustcInfo | None = None) -> None:
        self._rustc = rustc
        self.logger = get_logger("generator")

    def run(
        self,
        path: str | Path,
        *,
        mode: Mode = Mode.WRITE,
        output_dir: Path | None = None,
        targets_file: Path | None = None,
    ) -> GenerateOutcome:
        """Render every target page and write, diff or check them."""
        config = self._load_config(path, output_dir=output_dir, targets_file=targets_file)
        if config.output_dir == config.input_dir:
            raise TargetDocsError("output_dir must differ from input_dir")
        self.logger.info("Generating target docs for %s (%s)", config.root, mode.value)

        infos = load_target_infos(config.input_dir)
        targets = self._resolve_targets(config)
        result = assemble_all(targets, infos)
        for pattern in result.unmatched_patterns:
            self.logger.warning("Pattern %r does not match any target", pattern)

        rendered: Dict[Path, str] = {}
        stubbed = 0
        for docs in result.docs:
            rendered[config.output_dir / f"{docs.name}.md"] = render_target_page(docs)
            stubbed += len(docs.stubbed_sections)
            if docs.stubbed_sections:
                self.logger.debug(
                    "%s: stubbed %s", docs.name, ", ".join(docs.stubbed_sections)
                )
        rendered[config.output_dir / INDEX_FILENAME] = render_index(
            result.docs, title=config.index.title
        )
        rendered[config.output_dir / SUMMARY_FILENAME] = render_summary(
            result.docs, prefix=config.index.summary_prefix
        )

        outcome = GenerateOutcome(
            output_dir=config.output_dir,
            mode=mode,
            target_count=len(result.docs),
            stubbed_sections=stubbed,
            unmatched_patterns=list(result.unmatched_patterns),
        )
        rendered = {path: _with_header(content) for path, content in rendered.items()}
        self._compare(rendered, outcome)

        if mode is Mode.CHECK and not outcome.up_to_date:
            stale = [p.name for p in outcome.changed + outcome.removed]
            raise StaleOutputError(
                f"{len(stale)} generated file(s) are out of date: {', '.join(sorted(stale))}. "
                "Run `target-docs generate` to refresh them."
            )
        if mode is Mode.WRITE:
            self._write(rendered, outcome)
        return outcome

    def validate(self, path: str | Path, *, targets_file: Path | None = None) -> ValidationReport:
        """Parse every info file; count pattern matches when a target list is configured."""
        config = self._load_config(path, targets_file=targets_file)
        infos = load_target_infos(config.input_dir)
        check_footnotes(infos)
        report = ValidationReport(infos=infos)
        if config.targets_file is None and self._rustc is None:
            return report

        targets = self._resolve_targets(config)
        assemble_all(targets, infos)
        for info in infos:
            report.match_counts[info.pattern] = sum(
                1 for target in targets if matches(info.pattern, target.name)
            )
        return report

    def _load_config(
        self,
        path: str | Path,
        *,
        output_dir: Path | None = None,
        targets_file: Path | None = None,
    ) -> TargetDocsConfig:
        root = Path(path).expanduser().resolve()
        config = load_config(root)
        if output_dir is not None:
            config.output_dir = output_dir.expanduser().resolve()
        if targets_file is not None:
            config.targets_file = targets_file.expanduser().resolve()
        return config

    def _rustc_for(self, config: TargetDocsConfig) -> RustcInfo:
        if self._rustc is None:
            self._rustc = RustcInfo(config.rustc.path)
        return self._rustc

    def _resolve_targets(self, config: TargetDocsConfig) -> List[Target]:
        if config.targets_file is not None:
            names = _read_targets_file(config.targets_file)
            self.logger.debug("Read %d targets from %s", len(names), config.targets_file)
        else:
            names = self._rustc_for(config).target_list()
            self.logger.debug("rustc reported %d targets", len(names))

        names = [
            name
            for name in dict.fromkeys(names)
            if not any(matches(pattern, name) for pattern in config.exclude_targets)
        ]
        targets = [Target(name=name) for name in names]

        if config.rustc.metadata:
            metadata = self._rustc_for(config).target_metadata()
            for target in targets:
                if target.name in metadata:
                    target.metadata = metadata[target.name]
                else:
                    self.logger.warning("rustc has no metadata for %s", target.name)
        if config.rustc.cfgs:
            rustc = self._rustc_for(config)
            for target in targets:
                target.cfgs = rustc.target_cfgs(target.name)
        return targets

    def _compare(self, rendered: Dict[Path, str], outcome: GenerateOutcome) -> None:
        diffs: List[str] = []
        for path, content in rendered.items():
            original = _read_text(path) if path.exists() else ""
            if original == content:
                continue
            outcome.changed.append(path)
            diffs.append(_render_diff(path.name, original, content))

        if outcome.output_dir.is_dir():
            for existing in sorted(outcome.output_dir.glob("*.md")):
                if existing in rendered or not _is_generated(existing):
                    continue
                outcome.removed.append(existing)
                diffs.append(_render_diff(existing.name, _read_text(existing), ""))
        outcome.diff = "".join(diffs)

    def _write(self, rendered: Dict[Path, str], outcome: GenerateOutcome) -> None:
        try:
            outcome.output_dir.mkdir(parents=True, exist_ok=True)
            for path in outcome.changed:
                path.write_text(rendered[path], encoding="utf-8")
                self.logger.debug("Wrote %s", path)
            for path in outcome.removed:
                path.unlink()
                self.logger.info("Removed stale page %s", path.name)
        except OSError as exc:
            raise TargetDocsError(
                f"Cannot write generated pages to {outcome.output_dir}: {exc}"
            ) from exc
        self.logger.info(
            "%d of %d files changed in %s",
            len(outcome.changed),
            len(rendered),
            outcome.output_dir,
        )


def _read_targets_file(path: Path) -> List[str]:
    if not path.is_file():
        raise TargetDocsError(f"Targets file not found: {path}")
    names: List[str] = []
    for line in _read_text(path).splitlines():
        stripped = line.split("#", 1)[0].strip()
        if stripped:
            names.append(stripped)
    return names


def _with_header(content: str) -> str:
    return f"{GENERATED_HEADER}\n\n{content}"


def _is_generated(path: Path) -> bool:
    """Return True if ``path`` was written by target-docs; only those pages may be removed."""
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            first_line = handle.readline()
    except OSError as exc:
        raise TargetDocsError(f"Cannot read {path}: {exc}") from exc
    return first_line.rstrip("\n") == GENERATED_HEADER


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TargetDocsError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise TargetDocsError(f"Cannot read {path}: {exc}") from exc


def _render_diff(name: str, original: str, updated: str) -> str:
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        updated.splitlines(keepends=True),
        fromfile=f"{name} (current)",
        tofile=f"{name} (generated)",
    )
    return "".join(diff)


__all__ = ["GenerateOutcome", "Generator", "Mode", "ValidationReport"]
