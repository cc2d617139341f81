from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..logging_utils import success
from .command import run_cmd, which

logger = logging.getLogger(__name__)

_MAJOR = re.compile(r"^\s*v?(\d+)")


@dataclass(frozen=True)
class ToolStatus:
    name: str
    present: bool
    version: Optional[str] = None
    ok: bool = False


def parse_major(version: Optional[str]) -> Optional[int]:
    """'v17.2.0' -> 17, '20' -> 20, garbage -> None."""
    if not version:
        return None
    m = _MAJOR.match(version)
    return int(m.group(1)) if m else None


def meets_minimum(version: Optional[str], minimum: int = 18) -> bool:
    major = parse_major(version)
    return major is not None and major >= minimum


def _version_output(argv: list[str]) -> Optional[str]:
    r = run_cmd(argv, check=False)
    if r.returncode != 0:
        return None
    lines = r.stdout.strip().splitlines()
    return lines[0].strip() if lines else None


def check_git() -> ToolStatus:
    if not which("git"):
        logger.warning("Git not found")
        return ToolStatus(name="git", present=False)

    out = _version_output(["git", "--version"]) or ""
    # "git version 2.43.0"
    parts = out.split()
    version = parts[2] if len(parts) >= 3 else (out or None)
    success(logger, "Git %s detected", version or "(unknown version)")
    return ToolStatus(name="git", present=True, version=version, ok=True)


def check_node(minimum: int = 18) -> ToolStatus:
    if not which("node"):
        logger.warning("Node.js not found")
        return ToolStatus(name="node", present=False)

    raw = _version_output(["node", "--version"])
    version = raw.lstrip("v") if raw else None

    if meets_minimum(version, minimum):
        success(logger, "Node.js v%s detected (v%d+ required)", version, minimum)
        return ToolStatus(name="node", present=True, version=version, ok=True)

    logger.warning("Node.js v%s detected, but v%d+ is required", version or "?", minimum)
    return ToolStatus(name="node", present=True, version=version, ok=False)


def check_companion_cli(command: str = "claude") -> ToolStatus:
    if not which(command):
        return ToolStatus(name=command, present=False)

    version = _version_output([command, "--version"])
    success(logger, "Claude Code CLI detected: %s", version or "(unknown version)")
    return ToolStatus(name=command, present=True, version=version, ok=True)
