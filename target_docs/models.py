"""Core data models shared across target-docs components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple


@dataclass
class TargetInfoFile:
    """A parsed documentation file covering every target its pattern matches."""

    path: Path
    pattern: str
    maintainers: List[str] = field(default_factory=list)
    footnotes: Dict[str, List[str]] = field(default_factory=dict)
    sections: Dict[str, str] = field(default_factory=dict)


@dataclass
class TargetMetadata:
    """Platform metadata reported by rustc for a single target."""

    description: Optional[str] = None
    tier: Optional[int] = None
    host_tools: Optional[bool] = None
    std: Optional[bool] = None


@dataclass
class Target:
    """A compilation target and whatever rustc told us about it."""

    name: str
    metadata: TargetMetadata = field(default_factory=TargetMetadata)
    cfgs: List[Tuple[str, Optional[str]]] = field(default_factory=list)


@dataclass
class ResolvedSection:
    """A section of a target page, either documented or stubbed."""

    name: str
    content: Optional[str] = None

    @property
    def stubbed(self) -> bool:
        return not self.content


@dataclass
class TargetDocs:
    """Everything needed to render one target page."""

    target: Target
    sections: List[ResolvedSection]
    maintainers: List[str] = field(default_factory=list)
    footnotes: List[str] = field(default_factory=list)
    sources: List[Path] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.target.name

    @property
    def stubbed_sections(self) -> List[str]:
        return [section.name for section in self.sections if section.stubbed]
