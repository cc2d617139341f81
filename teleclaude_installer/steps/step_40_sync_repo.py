from __future__ import annotations

import logging

from .. import console
from ..lib.repo import sync_repo
from ..state import InstallState

logger = logging.getLogger(__name__)


class SyncRepoStep:
    step_id = "40_sync_repo"

    def run(self, state: InstallState) -> InstallState:
        console.print_step("Installing TeleClaude")
        cfg = state.config

        state.install_dir = sync_repo(
            cfg.install_dir,
            cfg.repo_url,
            branch=cfg.branch,
            dry_run=state.dry_run,
        )
        return state
