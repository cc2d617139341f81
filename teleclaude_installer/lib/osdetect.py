from __future__ import annotations

import logging
import platform
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MACOS = "macos"
LINUX = "linux"
WSL = "wsl"
WINDOWS = "windows"
UNKNOWN = "unknown"

SUPPORTED = (MACOS, LINUX, WSL)

_WSL_MARKER = re.compile(r"(microsoft|wsl)", re.IGNORECASE)

_LABELS = {
    MACOS: "macOS",
    LINUX: "Linux",
    WSL: "Windows Subsystem for Linux",
    WINDOWS: "Windows (native)",
}


@dataclass(frozen=True)
class HostInfo:
    os: str
    arch: str

    @property
    def supported(self) -> bool:
        return self.os in SUPPORTED


def _read_text(path: Path) -> Optional[str]:
    try:
        txt = path.read_text(encoding="utf-8", errors="ignore").strip()
        return txt or None
    except OSError:
        return None


def detect_os(kernel_name: Optional[str] = None, proc_version: Optional[str] = None) -> str:
    """Classify the running kernel into macos/linux/wsl/windows/unknown.

    ``kernel_name`` is what ``uname -s`` prints. On Linux the kernel version
    text is checked for Microsoft/WSL markers; it is read from /proc/version
    unless passed in.
    """

    name = platform.system() if kernel_name is None else kernel_name

    if name.startswith("Linux"):
        if proc_version is None:
            proc_version = _read_text(Path("/proc/version")) or ""
        return WSL if _WSL_MARKER.search(proc_version) else LINUX
    if name.startswith("Darwin"):
        return MACOS
    if name.startswith(("CYGWIN", "MINGW", "MSYS")) or name == "Windows":
        return WINDOWS
    return UNKNOWN


def detect_host() -> HostInfo:
    host = HostInfo(os=detect_os(), arch=platform.machine() or "unknown")
    logger.debug("Host: os=%s arch=%s", host.os, host.arch)
    return host


def describe_host(host: HostInfo) -> str:
    label = _LABELS.get(host.os, "Unknown operating system")
    return f"{label} ({host.arch})"
