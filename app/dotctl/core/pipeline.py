"""Fail-fast step pipeline.

Each step either completes or produces a failed outcome carrying the exit
code the process should end with. The pipeline stops at the first failure;
steps that already ran are not undone.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from dotctl.core.errors import DotctlError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Step:
    """A named unit of work.

    Attributes:
        name: Step identifier shown in logs and failure messages.
        action: Callable doing the work; raises on failure.
    """

    name: str
    action: Callable[[], None]


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Outcome of running a step.

    Attributes:
        name: The step's name.
        success: Whether the step completed.
        exit_code: Process exit code implied by this outcome.
        message: Failure description, None on success.
    """

    name: str
    success: bool
    exit_code: int = 0
    message: str | None = None


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Outcomes of every step that ran, in order."""

    outcomes: tuple[StepOutcome, ...]

    @property
    def success(self) -> bool:
        return all(outcome.success for outcome in self.outcomes)

    @property
    def failed(self) -> StepOutcome | None:
        """The step that stopped the pipeline, if any."""
        for outcome in self.outcomes:
            if not outcome.success:
                return outcome
        return None

    @property
    def exit_code(self) -> int:
        failed = self.failed
        return failed.exit_code if failed else 0

    @property
    def ran(self) -> list[str]:
        return [outcome.name for outcome in self.outcomes]


def run_step(step: Step) -> StepOutcome:
    """Run one step, turning expected failures into an outcome.

    ExternalCommandError keeps the command's own exit status; any other
    DotctlError or OSError maps to exit code 1.
    """
    logger.info("Running step %s", step.name)
    try:
        step.action()
    except DotctlError as e:
        logger.debug("Step %s failed", step.name, exc_info=True)
        return StepOutcome(name=step.name, success=False, exit_code=e.exit_code, message=str(e))
    except OSError as e:
        logger.debug("Step %s failed", step.name, exc_info=True)
        return StepOutcome(name=step.name, success=False, exit_code=1, message=str(e))
    return StepOutcome(name=step.name, success=True)


def run_pipeline(steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first failure.

    Args:
        steps: Steps to run.

    Returns:
        PipelineResult with the outcome of every step that ran.
    """
    outcomes: list[StepOutcome] = []
    for step in steps:
        outcome = run_step(step)
        outcomes.append(outcome)
        if not outcome.success:
            logger.info("Stopping after failed step %s", step.name)
            break
    return PipelineResult(outcomes=tuple(outcomes))
