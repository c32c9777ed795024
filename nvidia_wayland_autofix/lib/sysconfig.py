from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .command import privileged, run_cmd
from .env import PATHS, STAMP_FORMAT

logger = logging.getLogger(__name__)

DRM_MODESET_OPTIONS = "options nvidia-drm modeset=1\n"


def write_drm_modeset(conf_path: str = PATHS.modprobe_drm_conf, *, dry_run: bool = False) -> None:
    """Enable nvidia-drm kernel modesetting (required for Wayland sessions).

    The file is root-owned, so the contents go through `sudo tee` on stdin.
    """

    run_cmd(privileged(["tee", conf_path]), input_text=DRM_MODESET_OPTIONS, dry_run=dry_run)


def backup_path(path: Path, now: Optional[datetime] = None) -> Path:
    stamp = (now or datetime.now()).strftime(STAMP_FORMAT)
    return path.with_name(f"{path.name}.bak.{stamp}")


def backup_monitors(monitors: Path, *, dry_run: bool = False, now: Optional[datetime] = None) -> Optional[Path]:
    """Move a stale GNOME monitors.xml aside. Returns the backup path, or None if there was nothing to move."""

    if not monitors.is_file():
        logger.info("No monitors.xml found.")
        return None

    dest = backup_path(monitors, now)
    run_cmd(["mv", str(monitors), str(dest)], dry_run=dry_run)
    return dest
