from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import RunConfig
from ..errors import NoNvidiaGpu
from ..lib.hwdetect import detect_nvidia_gpu, kernel_release

logger = logging.getLogger(__name__)


class SanityChecksStep:
    step_id = "00_sanity_checks"
    title = "0. Basic sanity checks"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        if not detect_nvidia_gpu():
            logger.info("No NVIDIA GPU detected. Exiting.")
            raise NoNvidiaGpu("No NVIDIA GPU detected")

        state["kernel"] = kernel_release()
        logger.info("Kernel: %s", state["kernel"])
        return state
