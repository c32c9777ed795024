from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .lib.env import PATHS, default_log_dir


@dataclass(frozen=True)
class RunConfig:
    dry_run: bool
    detect_only: bool
    log_dir: Path
    home: Path

    def __post_init__(self) -> None:
        if self.detect_only and not self.dry_run:
            raise ValueError("detect_only requires dry_run")

    @classmethod
    def from_flags(
        cls,
        *,
        dry_run: bool = False,
        detect_only: bool = False,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
    ) -> "RunConfig":
        # --detect-only implies --dry-run
        home_dir = home or Path.home()
        return cls(
            dry_run=bool(dry_run or detect_only),
            detect_only=bool(detect_only),
            log_dir=default_log_dir(environ, home=home_dir),
            home=home_dir,
        )

    @property
    def mode(self) -> str:
        if self.detect_only:
            return "detect-only"
        return "dry-run" if self.dry_run else "apply"

    @property
    def monitors_path(self) -> Path:
        return self.home / PATHS.monitors_rel
