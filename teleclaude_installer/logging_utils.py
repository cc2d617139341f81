from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

DEFAULT_LOG_NAME = ".teleclaude-install.log"

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_MARKERS = {
    logging.DEBUG: "[.]",
    logging.INFO: "[i]",
    SUCCESS: "[OK]",
    logging.WARNING: "[!]",
    logging.ERROR: "[X]",
    logging.CRITICAL: "[X]",
}


def default_log_path() -> str:
    home = os.environ.get("HOME") or str(Path.home())
    return str(Path(home) / DEFAULT_LOG_NAME)


class MarkerFormatter(logging.Formatter):
    """Console format: two-space indent, severity marker, message."""

    def format(self, record: logging.LogRecord) -> str:
        marker = _MARKERS.get(record.levelno, "[?]")
        return f"  {marker} {record.getMessage()}"


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.DEBUG,
    console_level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging.

    Every command and its captured output goes to the log file at DEBUG; the
    console only shows operator-facing messages with [OK]/[!]/[X]/[i] markers.

    If the requested log file cannot be opened (read-only home, odd
    permissions) we fall back to a file in the current working directory.

    Returns the actual file path being used.
    """

    log_path = log_path or default_log_path()

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_teleclaude_configured", False):
        return getattr(logger, "_teleclaude_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError:
        chosen_path = str(Path.cwd() / "teleclaude-install.log")
        file_handler = logging.FileHandler(chosen_path)
    file_handler.setFormatter(fmt)
    file_handler.setLevel(level)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(MarkerFormatter())
        console.setLevel(console_level)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_teleclaude_configured", True)
    setattr(logger, "_teleclaude_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path


def success(logger: logging.Logger, msg: str, *args: object) -> None:
    logger.log(SUCCESS, msg, *args)
