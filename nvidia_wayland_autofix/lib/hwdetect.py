from __future__ import annotations

import logging
import platform

from ..errors import CommandFailed
from .command import run_cmd

logger = logging.getLogger(__name__)


def has_nvidia(lspci_output: str) -> bool:
    return "nvidia" in lspci_output.lower()


def detect_nvidia_gpu() -> bool:
    """Best-effort NVIDIA presence check over the PCI device listing.

    A missing or failing lspci counts as "no NVIDIA GPU".
    """

    try:
        r = run_cmd(["lspci"], capture=True)
    except CommandFailed as e:
        logger.warning("lspci unavailable: %s", e)
        return False
    return has_nvidia(r.stdout)


def kernel_release() -> str:
    """Running kernel release, as printed by `uname -r`."""
    return platform.release()
