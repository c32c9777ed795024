from __future__ import annotations

from types import SimpleNamespace
from typing import Dict, List, Set, Tuple

import pytest

from nvidia_wayland_autofix.lib import command
from nvidia_wayland_autofix.logging_utils import close_logging

LISTING_OPEN = """\
== /sys/devices/pci0000:00/0000:00:01.0/0000:01:00.0 ==
modalias : pci:v000010DEd00002684sv00001043sd000088E2bc03sc00i00
vendor   : NVIDIA Corporation
model    : AD102 [GeForce RTX 4090]
driver   : nvidia-driver-545 - distro non-free
driver   : nvidia-driver-535-open - distro non-free recommended
driver   : nvidia-driver-535 - distro non-free
driver   : xserver-xorg-video-nouveau - distro free builtin
"""

LISTING_PROPRIETARY = """\
== /sys/devices/pci0000:00/0000:00:01.0/0000:01:00.0 ==
vendor   : NVIDIA Corporation
model    : GP104 [GeForce GTX 1070]
driver   : nvidia-driver-470 - distro non-free recommended
driver   : nvidia-driver-535-open - distro non-free
driver   : xserver-xorg-video-nouveau - distro free builtin
"""

LISTING_NONE = """\
== /sys/devices/pci0000:00/0000:00:01.0/0000:01:00.0 ==
vendor   : NVIDIA Corporation
driver   : xserver-xorg-video-nouveau - distro free builtin
"""

LSPCI_NVIDIA = (
    "00:02.0 VGA compatible controller: Intel Corporation UHD Graphics 630\n"
    "01:00.0 VGA compatible controller: NVIDIA Corporation AD102 [GeForce RTX 4090] (rev a1)\n"
)
LSPCI_INTEL = "00:02.0 VGA compatible controller: Intel Corporation UHD Graphics 630\n"


class FakeSystem:
    """Stands in for subprocess.run / subprocess.Popen and records every argv."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.inputs: Dict[Tuple[str, ...], str] = {}
        self.responses: Dict[Tuple[str, ...], Tuple[int, str, str]] = {}
        self.missing: Set[str] = set()

    def respond(self, argv: List[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.responses[tuple(argv)] = (returncode, stdout, stderr)

    def _lookup(self, argv: List[str]) -> Tuple[int, str, str]:
        if argv[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return self.responses.get(tuple(argv), (0, "", ""))

    def run(self, argv, input=None, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        if input is not None:
            self.inputs[tuple(argv)] = input
        rc, out, err = self._lookup(argv)
        return SimpleNamespace(returncode=rc, stdout=out, stderr=err)

    def popen(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        rc, out, err = self._lookup(argv)

        class _Proc:
            def __init__(self) -> None:
                self.stdout = iter((out + err).splitlines(keepends=True))
                self.returncode = rc

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

            def wait(self, timeout=None):
                return self.returncode

        return _Proc()

    def commands(self) -> List[str]:
        return [" ".join(c) for c in self.calls]


@pytest.fixture
def fake_system(monkeypatch):
    fake = FakeSystem()
    monkeypatch.setattr(command.subprocess, "run", fake.run)
    monkeypatch.setattr(command.subprocess, "Popen", fake.popen)
    monkeypatch.setattr(command.os, "geteuid", lambda: 1000)
    return fake


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    close_logging()


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    return home_dir
