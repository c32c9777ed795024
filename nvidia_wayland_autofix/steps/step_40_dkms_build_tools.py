from __future__ import annotations

from typing import Any, Dict

from ..config import RunConfig
from ..lib.pkg import apt_install

BUILD_PACKAGES = ["dkms", "build-essential"]


class DkmsBuildToolsStep:
    step_id = "40_dkms_build_tools"
    title = "4. Install DKMS and build tools"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        apt_install(BUILD_PACKAGES, dry_run=cfg.dry_run)
        return state
