from __future__ import annotations

from pathlib import Path
from typing import Union

from .command import CmdResult, run_cmd

PathLike = Union[str, Path]


def npm_install(cwd: PathLike, *, dry_run: bool = False) -> CmdResult:
    return run_cmd(["npm", "install"], cwd=str(cwd), capture=False, dry_run=dry_run)


def npm_install_global(package: str, *, dry_run: bool = False) -> CmdResult:
    return run_cmd(["npm", "install", "-g", package], capture=False, dry_run=dry_run)


def npm_run(script: str, cwd: PathLike, *, dry_run: bool = False) -> CmdResult:
    """Run a package.json script attached to the terminal (stdin included)."""
    return run_cmd(["npm", "run", script], cwd=str(cwd), capture=False, dry_run=dry_run)
