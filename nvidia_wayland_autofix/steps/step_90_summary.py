from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ..config import RunConfig
from ..lib.command import privileged, run_cmd

logger = logging.getLogger(__name__)


class SummaryStep:
    step_id = "90_summary"
    title = "9. Summary"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        driver = state.get("driver")
        logger.info("Log file: %s", state.get("log_path"))
        logger.info("Mode    : %s", cfg.mode)
        logger.info("Dry-run : %s", str(cfg.dry_run).lower())
        logger.info("Driver  : %s", driver.name if driver else "-")
        return state


def prompt_reboot(cfg: RunConfig, input_fn: Optional[Callable[[str], str]] = None) -> bool:
    """Offer an immediate reboot. Only an explicit y/Y reboots. Returns True if a reboot was requested."""

    if cfg.dry_run:
        logger.info("Dry-run mode: no reboot.")
        return False

    logger.info("Reboot now? [y/N]:")
    try:
        answer = (input_fn or input)("")
    except EOFError:
        answer = ""

    if answer.strip().lower() != "y":
        logger.info("Reboot skipped.")
        return False

    run_cmd(privileged(["reboot"]))
    return True
