from __future__ import annotations

from .. import console
from ..state import InstallState


class NextStepsStep:
    step_id = "70_next_steps"

    def run(self, state: InstallState) -> InstallState:
        console.print_next_steps(state.install_dir or state.config.install_dir, state.config.docs_url)
        return state
