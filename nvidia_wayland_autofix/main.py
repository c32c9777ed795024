from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, NoReturn, Optional

from .config import RunConfig
from .errors import AutofixError, NoNvidiaGpu, SectionFailed
from .lib.env import default_log_dir
from .logging_utils import close_logging, configure_logging
from .pipeline import run_pipeline
from .steps import (
    DetectDriverStep,
    DetectOnlySummaryStep,
    DkmsBuildToolsStep,
    DrmModesetStep,
    InstallDriverStep,
    InstallUtilsStep,
    KernelHeadersStep,
    ResetMonitorsStep,
    SanityChecksStep,
    SummaryStep,
    UpdatePackagesStep,
    prompt_reboot,
)

logger = logging.getLogger(__name__)

PROG = "nvidia-wayland-autofix"


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits 2 on bad usage; this tool exits 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog=PROG,
        description="Recover a GNOME + Wayland + NVIDIA setup after Ubuntu or kernel upgrades.",
        epilog=(
            "Notes:\n"
            "  * --detect-only implies --dry-run\n"
            f"  * Logs are written to: {default_log_dir()}"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument("--dry-run", action="store_true", help="Show what would be done without changing the system")
    p.add_argument(
        "--detect-only",
        action="store_true",
        help="Perform detection only (no installs, no config changes)",
    )
    return p


def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    args = build_parser().parse_args(argv)
    return RunConfig.from_flags(dry_run=args.dry_run, detect_only=args.detect_only)


def build_steps(cfg: RunConfig):
    detection = [SanityChecksStep(), DetectDriverStep()]
    if cfg.detect_only:
        return [*detection, DetectOnlySummaryStep()]
    return [
        *detection,
        UpdatePackagesStep(),
        KernelHeadersStep(),
        DkmsBuildToolsStep(),
        InstallDriverStep(),
        InstallUtilsStep(),
        DrmModesetStep(),
        ResetMonitorsStep(),
        SummaryStep(),
    ]


def run(cfg: RunConfig, *, log_path: str = "", input_fn: Optional[Callable[[str], str]] = None) -> Dict[str, Any]:
    """Run detection and, unless detect-only, the full repair sequence."""

    if cfg.dry_run:
        logger.info(">>> DRY-RUN MODE ENABLED <<<")
    if cfg.detect_only:
        logger.info(">>> DETECT-ONLY MODE ENABLED <<<")

    state: Dict[str, Any] = {"log_path": log_path}
    state["sections"] = run_pipeline(cfg=cfg, state=state, steps=build_steps(cfg))

    if not cfg.detect_only:
        state["reboot_requested"] = prompt_reboot(cfg, input_fn)
    return state


def _exit_status(returncode: int) -> int:
    # Commands killed by a signal report -N; mirror the shell's 128+N.
    if returncode < 0:
        return 128 - returncode
    return returncode


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_config(argv)

    session = configure_logging(cfg.log_dir)
    try:
        run(cfg, log_path=str(session.path))
        return 0
    except NoNvidiaGpu:
        return 0
    except SectionFailed as e:
        return _exit_status(e.returncode)
    except AutofixError as e:
        logger.error("%s", e)
        return _exit_status(e.returncode or 1)
    except Exception:
        logger.exception("nvidia-wayland-autofix failed")
        raise
    finally:
        close_logging()


if __name__ == "__main__":
    raise SystemExit(main())
