from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from ..errors import AutofixError, DriverNotFoundError
from .command import run_cmd

logger = logging.getLogger(__name__)

_DRIVER_TOKEN = re.compile(r"nvidia-driver-[A-Za-z0-9.+-]*[A-Za-z0-9]")
_VERSION = re.compile(r"[0-9]+")


class DriverKind(str, enum.Enum):
    OPEN = "open"
    PROPRIETARY = "proprietary"


@dataclass(frozen=True)
class DriverChoice:
    name: str
    kind: DriverKind
    version: int

    @property
    def utils_package(self) -> str:
        return f"nvidia-utils-{self.version}"


def _first_match(lines: Sequence[str], required: Sequence[str]) -> Optional[str]:
    """Return the driver identifier of the first line carrying every required marker."""

    for line in lines:
        if all(tag in line for tag in required):
            m = _DRIVER_TOKEN.search(line)
            if m:
                return m.group(0)
    return None


def extract_version(driver: str) -> int:
    m = _VERSION.search(driver)
    if not m:
        raise ValueError(f"No version number in driver name: {driver!r}")
    return int(m.group(0))


def select_driver(listing: str) -> DriverChoice:
    """Pick the recommended driver from `ubuntu-drivers devices` output.

    Order of preference:
    1. nvidia-driver + open + recommended (OPEN kernel modules)
    2. nvidia-driver + recommended (proprietary)

    Within a tier the first matching line wins.
    """

    lines = listing.splitlines()

    name = _first_match(lines, ("nvidia-driver", "open", "recommended"))
    kind = DriverKind.OPEN
    if name is None:
        name = _first_match(lines, ("nvidia-driver", "recommended"))
        kind = DriverKind.PROPRIETARY

    if name is None:
        raise DriverNotFoundError(listing)

    try:
        version = extract_version(name)
    except ValueError as e:
        raise DriverNotFoundError(listing) from e

    return DriverChoice(name=name, kind=kind, version=version)


def list_drivers() -> str:
    """Raw `ubuntu-drivers devices` listing. Read-only, so it runs in dry-run too."""
    return run_cmd(["ubuntu-drivers", "devices"], capture=True).stdout


def driver_from_state(state: Dict[str, Any]) -> DriverChoice:
    driver = state.get("driver")
    if driver is None:
        raise AutofixError("driver missing; run driver detection first")
    return driver
