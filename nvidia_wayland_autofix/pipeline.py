from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol, Sequence

from .config import RunConfig
from .errors import AutofixError, CommandFailed, NoNvidiaGpu, SectionFailed

logger = logging.getLogger(__name__)

RULE = "-" * 49


class Step(Protocol):
    """A single section of the run."""

    step_id: str
    title: str

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class SectionResult:
    name: str
    elapsed_seconds: int
    success: bool
    returncode: int = 0


def run_section(name: str, action: Callable[[], Any]) -> SectionResult:
    """Bracket one action with a header, timing and a success/failure marker.

    Failures are fail-fast: the marker is logged and SectionFailed is raised
    with the status to exit with.
    """

    logger.info("")
    logger.info(RULE)
    logger.info(name)
    logger.info(RULE)

    start = time.monotonic()
    try:
        action()
    except NoNvidiaGpu:
        raise
    except AutofixError as e:
        elapsed = int(time.monotonic() - start)
        if isinstance(e, CommandFailed):
            logger.error("%s", e)
        result = SectionResult(name=name, elapsed_seconds=elapsed, success=False, returncode=e.returncode or 1)
        logger.error("✖ FAILED (%d s)", result.elapsed_seconds)
        raise SectionFailed(name, result.returncode, result.elapsed_seconds) from e

    elapsed = int(time.monotonic() - start)
    logger.info("✔ SUCCESS (%d s)", elapsed)
    return SectionResult(name=name, elapsed_seconds=elapsed, success=True)


def run_pipeline(
    *,
    cfg: RunConfig,
    state: Dict[str, Any],
    steps: Sequence[Step],
) -> List[SectionResult]:
    """Run steps in order, one section each. The first failure stops the run."""

    results: List[SectionResult] = []
    for step in steps:
        state["current_step"] = step.step_id

        def _action(step: Step = step) -> None:
            step.run(cfg, state)

        results.append(run_section(step.title, _action))

    state["current_step"] = None
    return results
