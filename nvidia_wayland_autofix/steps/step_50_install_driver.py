from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import RunConfig
from ..lib.drivers import driver_from_state
from ..lib.pkg import apt_install

logger = logging.getLogger(__name__)


class InstallDriverStep:
    step_id = "50_install_driver"
    title = "5. Install NVIDIA driver"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        apt_install([driver_from_state(state).name], dry_run=cfg.dry_run)
        return state
