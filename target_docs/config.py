"""Configuration loading for target-docs (.target-docs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import TargetDocsError

CONFIG_FILENAME = ".target-docs.yml"


class ConfigError(TargetDocsError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class RustcConfig:
    """How (and whether) to query rustc for targets and metadata."""

    path: str = "rustc"
    metadata: bool = False
    cfgs: bool = False


@dataclass
class IndexConfig:
    """Settings for the platform-support index and SUMMARY entries."""

    title: str = "Platform Support"
    summary_prefix: str = ""


@dataclass
class TargetDocsConfig:
    """Represents the settings defined in .target-docs.yml."""

    root: Path
    input_dir: Path
    output_dir: Path
    targets_file: Optional[Path] = None
    rustc: RustcConfig = field(default_factory=RustcConfig)
    exclude_targets: List[str] = field(default_factory=list)
    index: IndexConfig = field(default_factory=IndexConfig)


def load_config(config_path: Path) -> TargetDocsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return TargetDocsConfig(
            root=root,
            input_dir=root / "target_infos",
            output_dir=root / "generated",
        )

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    input_dir = _as_str(data.get("input_dir")) or "target_infos"
    output_dir = _as_str(data.get("output_dir")) or "generated"
    targets_file = _as_str(data.get("targets_file"))

    rustc = RustcConfig()
    rustc_data = _as_dict(data.get("rustc"))
    if rustc_data:
        rustc.path = _as_str(rustc_data.get("path")) or rustc.path
        rustc.metadata = bool(_as_bool(rustc_data.get("metadata")))
        rustc.cfgs = bool(_as_bool(rustc_data.get("cfgs")))

    index = IndexConfig()
    index_data = _as_dict(data.get("index"))
    if index_data:
        index.title = _as_str(index_data.get("title")) or index.title
        index.summary_prefix = _as_str(index_data.get("summary_prefix")) or ""

    return TargetDocsConfig(
        root=root,
        input_dir=root / input_dir,
        output_dir=root / output_dir,
        targets_file=root / targets_file if targets_file else None,
        rustc=rustc,
        exclude_targets=_as_str_list(data.get("exclude_targets")),
        index=index,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
