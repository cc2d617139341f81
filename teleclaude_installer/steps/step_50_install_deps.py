from __future__ import annotations

import logging

from .. import console
from ..lib.npm import npm_install
from ..logging_utils import success
from ..state import InstallState

logger = logging.getLogger(__name__)


class InstallDepsStep:
    step_id = "50_install_deps"

    def run(self, state: InstallState) -> InstallState:
        console.print_step("Installing Dependencies")
        install_dir = state.install_dir or state.config.install_dir

        logger.info("Running npm install...")
        npm_install(install_dir, dry_run=state.dry_run)

        success(logger, "Dependencies installed")
        return state
