"""
Shared fixtures for the installer tests.

No test may touch a real package manager, so every module that shells out is
pointed at a FakeShell that records commands and plays back canned results.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

import pytest

from teleclaude_installer.lib import command, installers, npm, repo, tools
from teleclaude_installer.lib.command import CmdResult, CommandError


class FakeShell:
    def __init__(self):
        self.calls: List[List[str]] = []
        self.cwds: List[Optional[str]] = []
        self.dry_runs: List[bool] = []
        self.executables: Dict[str, str] = {}
        self.responses: Dict[Tuple[str, ...], Tuple[int, str]] = {}
        self.hooks: Dict[Tuple[str, ...], Callable[[], None]] = {}

    def install(self, name: str, version_output: Optional[str] = None) -> None:
        self.executables[name] = f"/usr/bin/{name}"
        if version_output is not None:
            self.responses[(name, "--version")] = (0, version_output)

    def uninstall(self, name: str) -> None:
        self.executables.pop(name, None)

    def respond(self, argv, returncode: int = 0, stdout: str = "") -> None:
        self.responses[tuple(argv)] = (returncode, stdout)

    def on(self, argv, hook: Callable[[], None]) -> None:
        self.hooks[tuple(argv)] = hook

    def which(self, name):
        return self.executables.get(name)

    def run_cmd(self, argv, *, check=True, env=None, cwd=None, capture=True, dry_run=False):
        argv = list(argv)
        self.calls.append(argv)
        self.cwds.append(cwd)
        self.dry_runs.append(dry_run)
        hook = self.hooks.get(tuple(argv))
        if hook is not None:
            hook()
        returncode, stdout = self.responses.get(tuple(argv), (0, ""))
        if check and returncode != 0:
            raise CommandError(argv, returncode, "")
        return CmdResult(argv=argv, returncode=returncode, stdout=stdout, stderr="")

    def run_shell(self, script, *, check=True, cwd=None, dry_run=False):
        return self.run_cmd(["bash", "-c", script], check=check, cwd=cwd, capture=False, dry_run=dry_run)

    def ran(self, *prefix: str) -> bool:
        return any(call[: len(prefix)] == list(prefix) for call in self.calls)


@pytest.fixture
def shell(monkeypatch):
    fake = FakeShell()
    for mod in (tools, installers, repo, npm):
        monkeypatch.setattr(mod, "run_cmd", fake.run_cmd)
    monkeypatch.setattr(installers, "run_shell", fake.run_shell)
    for mod in (tools, installers):
        monkeypatch.setattr(mod, "which", fake.which)
    monkeypatch.setattr(command, "which", fake.which)
    return fake


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Fresh HOME and cwd per test; no real nvm or installer config leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("NVM_DIR", raising=False)
    monkeypatch.delenv("TELECLAUDE_INSTALLER_CONFIG", raising=False)
    monkeypatch.delenv("TELECLAUDE_INSTALLER_DRY_RUN", raising=False)
    monkeypatch.delenv("TELECLAUDE_INSTALLER_LOG", raising=False)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before and type(h) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for attr in ("_teleclaude_configured", "_teleclaude_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)
