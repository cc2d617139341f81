from __future__ import annotations

import logging
import os
from pathlib import Path

from ..logging_utils import success
from .command import run_cmd

logger = logging.getLogger(__name__)


def sync_repo(install_dir: Path, url: str, *, branch: str = "main", dry_run: bool = False) -> Path:
    """Clone ``url`` into ``install_dir``, or pull ``branch`` if it is already there.

    A failed pull (diverged history, offline, local edits) is tolerated and the
    existing checkout is used as-is. A failed clone raises CommandError.
    On return the process working directory is ``install_dir``.
    """

    install_dir = Path(install_dir)

    if install_dir.is_dir():
        logger.warning("Directory %s already exists", install_dir)
        logger.info("Pulling latest changes...")
        r = run_cmd(["git", "pull", "origin", branch], check=False, cwd=str(install_dir), dry_run=dry_run)
        if r.returncode != 0:
            logger.debug("git pull exited %s; keeping existing checkout", r.returncode)
    else:
        logger.info("Cloning TeleClaude repository...")
        run_cmd(["git", "clone", url, str(install_dir)], capture=False, dry_run=dry_run)

    if install_dir.is_dir():
        os.chdir(install_dir)
    success(logger, "Repository ready at %s", install_dir)
    return install_dir
