from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from .config import InstallerConfig
from .lib.osdetect import HostInfo


@dataclass
class InstallState:
    """Everything one run knows, passed explicitly from step to step."""

    config: InstallerConfig
    input_fn: Optional[Callable[[str], str]] = None
    host: Optional[HostInfo] = None
    git_version: Optional[str] = None
    node_version: Optional[str] = None
    companion_version: Optional[str] = None
    install_dir: Optional[Path] = None
    setup_ran: bool = False
    completed_steps: List[str] = field(default_factory=list)

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run

    def require_host(self) -> HostInfo:
        if self.host is None:
            raise RuntimeError("host not detected; run 10_detect_system first")
        return self.host
