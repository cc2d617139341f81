from __future__ import annotations

import logging

from .. import console
from ..lib.npm import npm_run
from ..state import InstallState

logger = logging.getLogger(__name__)


class SetupHandoffStep:
    step_id = "80_setup_handoff"

    def run(self, state: InstallState) -> InstallState:
        cfg = state.config
        script = cfg.setup_script

        if not console.confirm_setup(state.input_fn):
            print("")
            logger.info("Setup skipped. Run 'npm run %s' when ready.", script)
            print("")
            return state

        npm_run(script, state.install_dir or cfg.install_dir, dry_run=state.dry_run)
        state.setup_ran = True
        return state
