"""Queries a rustc binary for targets and their metadata."""

from __future__ import annotations

import json
import os
import subprocess
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import RustcError
from .logging import get_logger
from .models import TargetMetadata

Runner = Callable[..., str]


class RustcInfo:
    """Thin wrapper over ``rustc --print`` invocations."""

    def __init__(self, rustc: str = "rustc", runner: Runner | None = None) -> None:
        self.rustc = rustc
        self._runner = runner or self._default_runner
        self.logger = get_logger("rustc")

    def target_list(self) -> List[str]:
        """Return every built-in target known to rustc."""
        output = self._run([self.rustc, "--print", "target-list"])
        return [line.strip() for line in output.splitlines() if line.strip()]

    def target_metadata(self) -> Dict[str, TargetMetadata]:
        """Return description, tier, host tools and std support for every target."""
        env = dict(os.environ)
        env["RUSTC_BOOTSTRAP"] = "1"
        output = self._run(
            [self.rustc, "-Z", "unstable-options", "--print", "all-target-specs-json"],
            env=env,
        )
        try:
            specs = json.loads(output)
        except json.JSONDecodeError as exc:
            raise RustcError(f"rustc printed invalid target spec JSON: {exc}") from exc
        if not isinstance(specs, dict):
            raise RustcError("rustc target spec JSON must be an object keyed by target")

        result: Dict[str, TargetMetadata] = {}
        for name, spec in specs.items():
            raw = spec.get("metadata") if isinstance(spec, dict) else None
            result[name] = _metadata_from_json(raw if isinstance(raw, Mapping) else {})
        self.logger.debug("Read metadata for %d targets", len(result))
        return result

    def target_cfgs(self, target: str) -> List[Tuple[str, Optional[str]]]:
        """Return the ``cfg`` values rustc enables for ``target``."""
        output = self._run([self.rustc, "--print", "cfg", "--target", target])
        return parse_cfg_output(output)

    def _run(self, args: Sequence[str], env: Mapping[str, str] | None = None) -> str:
        self.logger.debug("Running %s", " ".join(args))
        return self._runner(list(args), env=env)

    @staticmethod
    def _default_runner(args: Sequence[str], env: Mapping[str, str] | None = None) -> str:
        try:
            completed = subprocess.run(
                list(args),
                env=dict(env) if env is not None else None,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise RustcError(f"rustc executable not found: {args[0]}") from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            raise RustcError(
                f"`{' '.join(args)}` exited with status {exc.returncode}: {stderr}"
            ) from exc
        return completed.stdout


def parse_cfg_output(output: str) -> List[Tuple[str, Optional[str]]]:
    """Parse ``rustc --print cfg`` lines of the form ``key`` or ``key="value"``."""
    cfgs: List[Tuple[str, Optional[str]]] = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        if "=" not in line:
            cfgs.append((line, None))
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        cfgs.append((key.strip(), value))
    return cfgs


def _metadata_from_json(raw: Mapping[str, object]) -> TargetMetadata:
    tier = raw.get("tier")
    description = raw.get("description")
    host_tools = raw.get("host_tools")
    std = raw.get("std")
    return TargetMetadata(
        description=description if isinstance(description, str) else None,
        tier=tier if isinstance(tier, int) and not isinstance(tier, bool) else None,
        host_tools=host_tools if isinstance(host_tools, bool) else None,
        std=std if isinstance(std, bool) else None,
    )


__all__ = ["RustcInfo", "parse_cfg_output"]
