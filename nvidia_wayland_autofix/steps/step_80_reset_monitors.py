from __future__ import annotations

from typing import Any, Dict

from ..config import RunConfig
from ..lib.sysconfig import backup_monitors


class ResetMonitorsStep:
    step_id = "80_reset_monitors"
    # Stale multi-monitor layouts often break after a driver change.
    title = "8. Reset GNOME monitor cache (safe)"

    def run(self, cfg: RunConfig, state: Dict[str, Any]) -> Dict[str, Any]:
        state["monitors_backup"] = backup_monitors(cfg.monitors_path, dry_run=cfg.dry_run)
        return state
