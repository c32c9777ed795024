from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_PREFIX = "nvidia-wayland-autofix"
STAMP_FORMAT = "%Y-%m-%d-%H%M"


@dataclass(frozen=True)
class Paths:
    modprobe_drm_conf: str = "/etc/modprobe.d/nvidia-drm.conf"
    monitors_rel: str = ".config/monitors.xml"


PATHS = Paths()


def default_log_dir(environ: Optional[Mapping[str, str]] = None, *, home: Optional[Path] = None) -> Path:
    """Return $XDG_STATE_HOME, falling back to ~/.local/state when unset or empty."""

    env = os.environ if environ is None else environ
    state_home = env.get("XDG_STATE_HOME")
    if state_home:
        return Path(state_home)
    return (home or Path.home()) / ".local" / "state"
