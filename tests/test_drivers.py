from __future__ import annotations

import pytest

from conftest import LISTING_NONE, LISTING_OPEN, LISTING_PROPRIETARY
from nvidia_wayland_autofix.errors import DriverNotFoundError
from nvidia_wayland_autofix.lib.drivers import DriverKind, extract_version, select_driver


def test_open_recommended_wins_over_other_lines():
    choice = select_driver(LISTING_OPEN)
    assert choice.name == "nvidia-driver-535-open"
    assert choice.kind is DriverKind.OPEN
    assert choice.version == 535


def test_falls_back_to_proprietary_recommended():
    choice = select_driver(LISTING_PROPRIETARY)
    assert choice.name == "nvidia-driver-470"
    assert choice.kind is DriverKind.PROPRIETARY
    assert choice.utils_package == "nvidia-utils-470"


def test_first_matching_line_wins_within_a_tier():
    listing = (
        "driver   : nvidia-driver-550-open - distro non-free recommended\n"
        "driver   : nvidia-driver-535-open - distro non-free recommended\n"
    )
    assert select_driver(listing).name == "nvidia-driver-550-open"


def test_no_recommended_driver_carries_listing():
    with pytest.raises(DriverNotFoundError) as exc:
        select_driver(LISTING_NONE)
    assert exc.value.listing == LISTING_NONE


def test_empty_listing_is_not_found():
    with pytest.raises(DriverNotFoundError):
        select_driver("")


def test_comma_separated_line():
    choice = select_driver("nvidia-driver-535-open, (open) recommended")
    assert choice.name == "nvidia-driver-535-open"
    assert choice.kind is DriverKind.OPEN
    assert choice.version == 535
    assert choice.utils_package == "nvidia-utils-535"


def test_extract_version_takes_first_number():
    assert extract_version("nvidia-driver-550-server-open") == 550
    with pytest.raises(ValueError):
        extract_version("nvidia-driver-open")
