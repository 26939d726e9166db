"""Tests for merging target info files into per-target pages."""

from __future__ import annotations

from pathlib import Path

import pytest

from target_docs.constants import SECTIONS
from target_docs.errors import FootnoteError, SectionConflictError
from target_docs.models import Target, TargetInfoFile
from target_docs.render import assemble_all, assemble_target


def _info(pattern: str, **kwargs) -> TargetInfoFile:
    return TargetInfoFile(path=Path(f"{pattern}.md"), pattern=pattern, **kwargs)


def test_assemble_target_stubs_missing_sections_in_fixed_order() -> None:
    info = _info("*-unknown-openbsd", sections={"Testing": "Run tests.", "Overview": "BSD."})

    docs = assemble_target(Target("x86_64-unknown-openbsd"), [info])

    assert [section.name for section in docs.sections] == list(SECTIONS)
    assert docs.sections[0].content == "BSD."
    assert docs.sections[2].content == "Run tests."
    assert docs.stubbed_sections == [
        "Requirements",
        "Building the target",
        "Cross compilation",
        "Building Rust programs",
    ]
    assert docs.sources == [Path("*-unknown-openbsd.md")]


def test_assemble_target_without_matches_is_fully_stubbed() -> None:
    docs = assemble_target(Target("wasm32-wasip2"), [_info("*-apple-darwin")])
    assert docs.stubbed_sections == list(SECTIONS)
    assert docs.sources == []
    assert docs.maintainers == []


def test_assemble_target_merges_sections_and_maintainers_across_files() -> None:
    generic = _info(
        "*-unknown-openbsd",
        maintainers=["@semarie", "@bsd-team"],
        sections={"Overview": "OpenBSD."},
    )
    specific = _info(
        "sparc64-unknown-openbsd",
        maintainers=["@bsd-team", "@sparc"],
        sections={"Requirements": "Big-endian host."},
        footnotes={"sparc64-unknown-openbsd": ["Only tested in QEMU."]},
    )

    docs = assemble_target(Target("sparc64-unknown-openbsd"), [generic, specific])

    assert docs.maintainers == ["@semarie", "@bsd-team", "@sparc"]
    assert docs.sections[0].content == "OpenBSD."
    assert docs.sections[1].content == "Big-endian host."
    assert docs.footnotes == ["Only tested in QEMU."]


def test_assemble_target_rejects_section_defined_twice() -> None:
    first = _info("*-unknown-openbsd", sections={"Overview": "one"})
    second = _info("x86_64-*", sections={"Overview": "two"})

    with pytest.raises(SectionConflictError, match="'Overview'"):
        assemble_target(Target("x86_64-unknown-openbsd"), [first, second])


def test_assemble_all_sorts_targets_and_reports_unmatched_patterns() -> None:
    infos = [_info("*-unknown-openbsd"), _info("*-sony-*")]
    targets = [Target("x86_64-unknown-openbsd"), Target("aarch64-unknown-openbsd")]

    result = assemble_all(targets, infos)

    assert [docs.name for docs in result.docs] == [
        "aarch64-unknown-openbsd",
        "x86_64-unknown-openbsd",
    ]
    assert result.unmatched_patterns == ["*-sony-*"]


def test_assemble_all_rejects_footnote_for_unmatched_target() -> None:
    info = _info("*-unknown-openbsd", footnotes={"x86_64-unknown-linux-gnu": ["nope"]})
    with pytest.raises(FootnoteError, match="x86_64-unknown-linux-gnu"):
        assemble_all([Target("x86_64-unknown-openbsd")], [info])
