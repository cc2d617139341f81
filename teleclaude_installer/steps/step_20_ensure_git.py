from __future__ import annotations

import logging

from .. import console
from ..errors import InstallerError
from ..lib.installers import install_git
from ..lib.tools import check_git
from ..state import InstallState

logger = logging.getLogger(__name__)


class EnsureGitStep:
    step_id = "20_ensure_git"

    def run(self, state: InstallState) -> InstallState:
        console.print_step("Checking Git")
        host = state.require_host()

        status = check_git()
        if not status.ok:
            install_git(host.os, dry_run=state.dry_run)
            status = check_git()
            if not status.ok:
                logger.error("Failed to install Git")
                raise InstallerError("Git is still unavailable after installation")

        state.git_version = status.version
        return state
