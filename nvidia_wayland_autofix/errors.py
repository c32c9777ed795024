from __future__ import annotations

from typing import Sequence


class AutofixError(RuntimeError):
    """Base class for errors that end a run with a non-zero status."""

    returncode = 1


class NoNvidiaGpu(AutofixError):
    """No NVIDIA device on the PCI bus. Nothing to do, so the exit status is 0."""

    returncode = 0


class DriverNotFoundError(AutofixError):
    def __init__(self, listing: str) -> None:
        super().__init__("No recommended NVIDIA driver found")
        self.listing = listing


class CommandFailed(AutofixError):
    def __init__(self, argv: Sequence[str], returncode: int, output: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.output = output
        super().__init__(f"Command failed ({returncode}): {' '.join(self.argv)}")


class SectionFailed(AutofixError):
    def __init__(self, section: str, returncode: int, elapsed_seconds: int = 0) -> None:
        self.section = section
        self.returncode = returncode
        self.elapsed_seconds = elapsed_seconds
        super().__init__(f"Section failed ({returncode}): {section}")
