from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence

from .state import InstallState

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single installer step."""

    step_id: str

    def run(self, state: InstallState) -> InstallState:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: InstallState
    ran_steps: List[str]


def run_pipeline(*, state: InstallState, steps: Sequence[Step]) -> PipelineResult:
    """Run steps strictly in order; the first exception stops the run."""

    ran: List[str] = []

    for step in steps:
        logger.debug("Running step %s", step.step_id)
        state = step.run(state)
        state.completed_steps.append(step.step_id)
        ran.append(step.step_id)

    return PipelineResult(state=state, ran_steps=ran)
