"""Tests for loading a directory of target info files."""

from __future__ import annotations

from pathlib import Path

import pytest

from target_docs.errors import PatternMismatchError, TargetDocsError
from target_docs.infos import load_target_infos
from tests._fixtures.project_builder import ProjectBuilder


def test_load_target_infos_reads_files_in_sorted_order(project: ProjectBuilder) -> None:
    project.write_info("x86_64-unknown-linux-gnu", sections={"Overview": "Linux."})
    project.write_info("*-apple-darwin", sections={"Testing": "CI."})
    (project.infos / "notes.txt").write_text("ignored", encoding="utf-8")

    infos = load_target_infos(project.infos)

    assert [info.pattern for info in infos] == ["*-apple-darwin", "x86_64-unknown-linux-gnu"]
    assert infos[1].sections == {"Overview": "Linux."}


def test_load_target_infos_rejects_filename_mismatch(project: ProjectBuilder) -> None:
    project.write_info("*-unknown-openbsd", filename="openbsd.md")
    with pytest.raises(PatternMismatchError):
        load_target_infos(project.infos)


def test_load_target_infos_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(TargetDocsError, match="not found"):
        load_target_infos(tmp_path / "missing")
