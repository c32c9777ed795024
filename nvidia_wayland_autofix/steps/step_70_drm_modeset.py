from __future__ import annotations

from typing import Any, Dict

from ..config import RunConfig
from ..lib.sysconfig import write_drm_modeset


class DrmModesetStep:
    step_id = "70_drm_modeset"
    title = "7. Ensure DRM modeset (Wayland)"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        write_drm_modeset(dry_run=cfg.dry_run)
        return state
