from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import RunConfig

logger = logging.getLogger(__name__)


class DetectOnlySummaryStep:
    step_id = "15_detect_only_summary"
    title = "2. Detect-only summary"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("No actions performed.")
        logger.info("Log file: %s", state.get("log_path"))
        return state
