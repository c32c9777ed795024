from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import RunConfig
from ..errors import DriverNotFoundError
from ..lib.drivers import list_drivers, select_driver

logger = logging.getLogger(__name__)


class DetectDriverStep:
    step_id = "10_detect_driver"
    title = "1. Detect recommended NVIDIA driver (prefer OPEN)"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        listing = list_drivers()
        try:
            driver = select_driver(listing)
        except DriverNotFoundError:
            logger.error("❌ No recommended NVIDIA driver found:")
            logger.error("%s", listing.rstrip("\n"))
            raise

        state["driver"] = driver
        logger.info("Selected driver : %s", driver.name)
        logger.info("Driver type     : %s", driver.kind.value)
        logger.info("Driver version  : %s", driver.version)
        return state
