from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Mapping, MutableMapping, Optional, Sequence, Tuple, Union

from ..errors import InstallerError
from . import osdetect
from .command import run_cmd, run_shell, which

logger = logging.getLogger(__name__)

# argv list -> run directly; str -> bash -c (pipelines such as curl | bash)
Command = Union[Sequence[str], str]

NODE = "node"
GIT = "git"


@dataclass(frozen=True)
class InstallStrategy:
    name: str
    probe: Optional[str]
    commands: Tuple[Command, ...]

    def render(self, variables: Mapping[str, object]) -> List[Command]:
        out: List[Command] = []
        for cmd in self.commands:
            if isinstance(cmd, str):
                out.append(cmd.format(**variables))
            else:
                out.append([part.format(**variables) for part in cmd])
        return out


_NODE_LINUX = (
    InstallStrategy(
        "nvm",
        "nvm",
        ('. "${{NVM_DIR:-$HOME/.nvm}}/nvm.sh" && nvm install {major} && nvm use {major} && nvm alias default {major}',),
    ),
    InstallStrategy(
        "apt",
        "apt-get",
        (
            "curl -fsSL https://deb.nodesource.com/setup_{major}.x | sudo -E bash -",
            ["sudo", "apt-get", "install", "-y", "nodejs"],
        ),
    ),
    InstallStrategy("dnf", "dnf", (["sudo", "dnf", "install", "-y", "nodejs"],)),
    InstallStrategy(
        "yum",
        "yum",
        (
            "curl -fsSL https://rpm.nodesource.com/setup_{major}.x | sudo bash -",
            ["sudo", "yum", "install", "-y", "nodejs"],
        ),
    ),
    InstallStrategy("pacman", "pacman", (["sudo", "pacman", "-S", "--noconfirm", "nodejs", "npm"],)),
)

_GIT_LINUX = (
    InstallStrategy("apt", "apt-get", (["sudo", "apt-get", "update"], ["sudo", "apt-get", "install", "-y", "git"])),
    InstallStrategy("dnf", "dnf", (["sudo", "dnf", "install", "-y", "git"],)),
    InstallStrategy("yum", "yum", (["sudo", "yum", "install", "-y", "git"],)),
    InstallStrategy("pacman", "pacman", (["sudo", "pacman", "-S", "--noconfirm", "git"],)),
)

STRATEGIES: Dict[Tuple[str, str], Tuple[InstallStrategy, ...]] = {
    (NODE, osdetect.MACOS): (
        InstallStrategy(
            "homebrew",
            "brew",
            (
                ["brew", "install", "node@{major}"],
                ["brew", "link", "node@{major}", "--force", "--overwrite"],
            ),
        ),
        InstallStrategy(
            "official-pkg",
            None,
            (
                ["curl", "-fsSL", "{pkg_url}", "-o", "/tmp/node.pkg"],
                ["sudo", "installer", "-pkg", "/tmp/node.pkg", "-target", "/"],
                ["rm", "/tmp/node.pkg"],
            ),
        ),
    ),
    (NODE, osdetect.LINUX): _NODE_LINUX,
    (NODE, osdetect.WSL): _NODE_LINUX,
    (GIT, osdetect.MACOS): (
        InstallStrategy("homebrew", "brew", (["brew", "install", "git"],)),
        InstallStrategy("xcode-select", None, (["xcode-select", "--install"],)),
    ),
    (GIT, osdetect.LINUX): _GIT_LINUX,
    (GIT, osdetect.WSL): _GIT_LINUX,
}


def nvm_available(environ: Optional[Mapping[str, str]] = None) -> bool:
    # nvm is a shell function, not an executable; look for its loader script.
    env = os.environ if environ is None else environ
    nvm_dir = env.get("NVM_DIR") or str(Path(env.get("HOME") or Path.home()) / ".nvm")
    return (Path(nvm_dir) / "nvm.sh").is_file()


def probe_available(probe: Optional[str]) -> bool:
    if probe is None:
        return True
    if probe == "nvm":
        return nvm_available()
    return which(probe) is not None


def select_strategy(
    tool: str,
    os_tag: str,
    *,
    available: Callable[[Optional[str]], bool] = probe_available,
) -> Optional[InstallStrategy]:
    for strategy in STRATEGIES.get((tool, os_tag), ()):
        if available(strategy.probe):
            return strategy
    return None


def _execute(commands: List[Command], *, dry_run: bool) -> None:
    for cmd in commands:
        if isinstance(cmd, str):
            run_shell(cmd, dry_run=dry_run)
        else:
            run_cmd(cmd, capture=False, dry_run=dry_run)


def install_node(
    os_tag: str,
    *,
    major: int = 20,
    pkg_url: str = "",
    dry_run: bool = False,
    available: Callable[[Optional[str]], bool] = probe_available,
) -> InstallStrategy:
    logger.info("Installing Node.js LTS...")

    if os_tag == osdetect.WINDOWS:
        logger.warning("On Windows, please install Node.js from https://nodejs.org/")
        logger.warning("Or use: winget install OpenJS.NodeJS.LTS")
        raise InstallerError("Node.js must be installed manually on Windows")
    if os_tag not in osdetect.SUPPORTED:
        logger.error("Unsupported operating system")
        raise InstallerError(f"Unsupported operating system: {os_tag}")

    strategy = select_strategy(NODE, os_tag, available=available)
    if strategy is None:
        logger.error("Could not detect package manager.")
        logger.info("Please install Node.js manually: https://nodejs.org/")
        raise InstallerError("No supported package manager found for Node.js")

    logger.info("Using %s to install Node.js...", strategy.name)
    _execute(strategy.render({"major": major, "pkg_url": pkg_url}), dry_run=dry_run)
    return strategy


def install_git(
    os_tag: str,
    *,
    dry_run: bool = False,
    available: Callable[[Optional[str]], bool] = probe_available,
) -> Optional[InstallStrategy]:
    """Best-effort: with no usable package manager this only warns; the
    caller's re-check decides whether the run can continue."""

    logger.info("Installing Git...")

    strategy = select_strategy(GIT, os_tag, available=available)
    if strategy is None:
        logger.warning("No supported package manager found to install Git")
        return None

    logger.info("Using %s to install Git...", strategy.name)
    _execute(strategy.render({}), dry_run=dry_run)
    return strategy


def _merge_path(current: str, fresh: str) -> Tuple[str, List[str]]:
    have = current.split(os.pathsep) if current else []
    added = [p for p in fresh.split(os.pathsep) if p and p not in have]
    if not added:
        return current, []
    return os.pathsep.join(added + have), added


def refresh_path(
    home: str,
    *,
    environ: Optional[MutableMapping[str, str]] = None,
    dry_run: bool = False,
) -> List[str]:
    """Source ~/.bashrc and ~/.zshrc in child shells and adopt any new PATH entries.

    A Python process cannot source a profile into itself, so this is the
    nearest equivalent. Every failure is ignored.
    """

    env = os.environ if environ is None else environ
    added: List[str] = []

    for profile, shell in ((".bashrc", "bash"), (".zshrc", "zsh")):
        path = Path(home) / profile
        if not path.is_file() or which(shell) is None:
            continue
        r = run_cmd(
            [shell, "-c", f'. "{path}" >/dev/null 2>&1; printf %s "$PATH"'],
            check=False,
            dry_run=dry_run,
        )
        if r.returncode != 0 and not r.stdout:
            logger.debug("Sourcing %s failed (%s)", path, r.returncode)
            continue
        merged, new = _merge_path(env.get("PATH", ""), r.stdout.strip())
        if new:
            env["PATH"] = merged
            added.extend(new)

    if added:
        logger.debug("PATH gained: %s", os.pathsep.join(added))
    return added
