"""Helper utilities for constructing temporary target-docs projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable, Mapping, Sequence


class ProjectBuilder:
    """Writes target info files, target lists and config into a throwaway project."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()
        self.infos = self.root / "target_infos"
        self.infos.mkdir()

    def write_info(
        self,
        pattern: str,
        *,
        sections: Mapping[str, str] | None = None,
        maintainers: Sequence[str] = (),
        footnotes: Mapping[str, Sequence[str]] | None = None,
        filename: str | None = None,
    ) -> Path:
        """Write a target info file declaring ``pattern``."""
        lines = ["---", f'pattern: "{pattern}"']
        if maintainers:
            lines.append("maintainers:")
            lines.extend(f'  - "{name}"' for name in maintainers)
        if footnotes:
            lines.append("footnotes:")
            for target, notes in footnotes.items():
                lines.append(f"  {target}:")
                lines.extend(f'    - "{note}"' for note in notes)
        lines.append("---")
        for name, body in (sections or {}).items():
            lines.extend(["", f"## {name}", "", textwrap.dedent(body).strip()])
        path = self.infos / (filename or f"{pattern}.md")
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    def write_raw(self, filename: str, content: str) -> Path:
        """Write an info file verbatim (after dedenting)."""
        path = self.infos / filename
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    def write_targets(self, names: Iterable[str], filename: str = "targets.txt") -> Path:
        """Write a target list file, one name per line."""
        path = self.root / filename
        path.write_text("\n".join(names) + "\n", encoding="utf-8")
        return path

    def write_config(self, content: str) -> Path:
        """Write .target-docs.yml."""
        path = self.root / ".target-docs.yml"
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    def output(self, name: str) -> Path:
        """Return the path of a generated file under the default output dir."""
        return self.root / "generated" / name


__all__ = ["ProjectBuilder"]
