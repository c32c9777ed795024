from __future__ import annotations

from typing import Sequence

from .command import CmdResult, privileged, run_cmd


def apt_update(*, dry_run: bool = False) -> CmdResult:
    return run_cmd(privileged(["apt", "update"]), dry_run=dry_run)


def apt_install(packages: Sequence[str], *, dry_run: bool = False) -> CmdResult:
    if not packages:
        raise ValueError("apt_install needs at least one package")
    return run_cmd(privileged(["apt", "install", "-y", *packages]), dry_run=dry_run)
