from __future__ import annotations

from typing import Any, Dict

from ..config import RunConfig
from ..lib.drivers import driver_from_state
from ..lib.pkg import apt_install


class InstallUtilsStep:
    step_id = "60_install_utils"
    title = "6. Install matching NVIDIA utilities"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        apt_install([driver_from_state(state).utils_package], dry_run=cfg.dry_run)
        return state
