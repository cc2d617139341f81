from __future__ import annotations

import logging

from .. import console
from ..lib.npm import npm_install_global
from ..lib.tools import check_companion_cli
from ..logging_utils import success
from ..state import InstallState

logger = logging.getLogger(__name__)


class CompanionCliStep:
    """Optional: a CLI that lands outside PATH only warns."""

    step_id = "60_companion_cli"

    def run(self, state: InstallState) -> InstallState:
        console.print_step("Checking Claude Code CLI")
        cfg = state.config

        status = check_companion_cli(cfg.companion_command)
        if status.present:
            state.companion_version = status.version
            return state

        console.print_step("Installing Claude Code CLI")
        logger.info("Installing via npm...")
        npm_install_global(cfg.companion_package, dry_run=state.dry_run)

        status = check_companion_cli(cfg.companion_command)
        if status.present:
            state.companion_version = status.version
            success(logger, "Claude Code CLI installed successfully")
        else:
            logger.warning("Claude CLI installed but may not be in PATH")
            logger.info("Try reopening your terminal or adding npm global bin to PATH")
        return state
