from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

CONFIG_ENV = "TELECLAUDE_INSTALLER_CONFIG"
DRY_RUN_ENV = "TELECLAUDE_INSTALLER_DRY_RUN"
LOG_ENV = "TELECLAUDE_INSTALLER_LOG"

DEFAULT_REPO_URL = "https://github.com/gatordevin/teleclaude.git"
DEFAULT_DOCS_URL = "https://github.com/gatordevin/teleclaude"
DEFAULT_NODE_PKG_URL = "https://nodejs.org/dist/v20.11.0/node-v20.11.0.pkg"

_TRUTHY = {"1", "true", "yes", "on"}
_SECTIONS = ("repo", "node", "companion_cli")


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any] = field(default_factory=dict)
    home: str = field(default_factory=lambda: os.environ.get("HOME") or str(Path.home()))

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    def _int(self, section: str, key: str, default: int) -> int:
        value = self._section(section).get(key)
        return default if value is None else int(value)

    @property
    def install_dir(self) -> Path:
        configured = self.raw.get("install_dir")
        if configured:
            return Path(str(configured)).expanduser()
        return Path(self.home) / "teleclaude"

    @property
    def repo_url(self) -> str:
        return str(self._section("repo").get("url") or DEFAULT_REPO_URL)

    @property
    def branch(self) -> str:
        return str(self._section("repo").get("branch") or "main")

    @property
    def docs_url(self) -> str:
        return str(self.raw.get("docs_url") or DEFAULT_DOCS_URL)

    @property
    def node_min_major(self) -> int:
        return self._int("node", "min_major", 18)

    @property
    def node_lts_major(self) -> int:
        return self._int("node", "lts_major", 20)

    @property
    def node_pkg_url(self) -> str:
        return str(self._section("node").get("pkg_url") or DEFAULT_NODE_PKG_URL)

    @property
    def companion_package(self) -> str:
        return str(self._section("companion_cli").get("package") or "@anthropic-ai/claude-code")

    @property
    def companion_command(self) -> str:
        return str(self._section("companion_cli").get("command") or "claude")

    @property
    def setup_script(self) -> str:
        return str(self.raw.get("setup_script") or "setup")

    @property
    def dry_run(self) -> bool:
        return bool(self.raw.get("dry_run", False))

    @property
    def log_path(self) -> Optional[str]:
        value = self.raw.get("log_path")
        return str(Path(str(value)).expanduser()) if value else None


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(str(path))

    if path.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError(f"installer config must be YAML: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"installer config must contain a mapping/object: {path}")
    _validate(raw, path)
    return raw


def _validate(raw: Dict[str, Any], path: Path) -> None:
    for section in _SECTIONS:
        value = raw.get(section)
        if value is not None and not isinstance(value, dict):
            raise ValueError(f"{path}: '{section}' must be a mapping, got {type(value).__name__}")

    node = raw.get("node") or {}
    for key in ("min_major", "lts_major"):
        value = node.get(key)
        if value is None:
            continue
        if isinstance(value, bool):
            raise ValueError(f"{path}: node.{key} must be an integer, got {value!r}")
        try:
            int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{path}: node.{key} must be an integer, got {value!r}") from None


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> InstallerConfig:
    """Build the installer config from an optional YAML file plus environment.

    The file is taken from ``path`` or $TELECLAUDE_INSTALLER_CONFIG; without
    either, built-in defaults apply. $TELECLAUDE_INSTALLER_DRY_RUN and
    $TELECLAUDE_INSTALLER_LOG override the file.
    """

    env = os.environ if environ is None else environ

    config_path = path or env.get(CONFIG_ENV)
    raw: Dict[str, Any] = _read_yaml(Path(config_path).expanduser()) if config_path else {}

    if str(env.get(DRY_RUN_ENV, "")).strip().lower() in _TRUTHY:
        raw["dry_run"] = True
    if env.get(LOG_ENV):
        raw["log_path"] = env[LOG_ENV]

    home = env.get("HOME") or str(Path.home())
    return InstallerConfig(raw=raw, home=home)
