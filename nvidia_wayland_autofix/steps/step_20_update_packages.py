from __future__ import annotations

from typing import Any, Dict

from ..config import RunConfig
from ..lib.pkg import apt_update


class UpdatePackagesStep:
    step_id = "20_update_packages"
    title = "2. Update package lists"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        apt_update(dry_run=cfg.dry_run)
        return state
