from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence

from .context import BootstrapCtx
from .errors import StepFailure


class Step(Protocol):
    """A single provisioning step; raises StepFailure when it does not succeed."""

    step_id: str
    description: str

    def run(self, ctx: BootstrapCtx) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]


def run_pipeline(*, ctx: BootstrapCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first failure.

    Failures are re-raised as StepFailure tagged with the step id. Nothing is
    rolled back; effects of earlier steps stay on disk.
    """

    ran: List[str] = []

    for step in steps:
        ctx.log.info("[%s] %s", step.step_id, step.description)
        try:
            step.run(ctx)
        except StepFailure as e:
            if e.step_id is None:
                e.step_id = step.step_id
            raise
        except OSError as e:
            raise StepFailure(f"{step.description} failed: {e}", step_id=step.step_id) from e
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran)
