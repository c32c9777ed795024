from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .lib.env import LOG_PREFIX, STAMP_FORMAT


@dataclass(frozen=True)
class LogSession:
    path: Path
    start_time: datetime


def log_file_for(log_dir: Path, now: Optional[datetime] = None) -> Path:
    stamp = (now or datetime.now()).strftime(STAMP_FORMAT)
    return log_dir / f"{LOG_PREFIX}-{stamp}.log"


def configure_logging(
    log_dir: Path,
    level: int = logging.INFO,
    also_console: bool = True,
    now: Optional[datetime] = None,
) -> LogSession:
    """Mirror everything the runner prints into a per-invocation log file.

    The file gets timestamps and logger names; the console gets the bare
    message so the terminal reads like the section output it is.

    Returns the LogSession describing the file in use.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    existing = getattr(logger, "_autofix_session", None)
    if existing is not None:
        return existing

    start = now or datetime.now()
    log_path = log_file_for(log_dir, start)
    log_dir.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = []

    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    session = LogSession(path=log_path, start_time=start)
    setattr(logger, "_autofix_session", session)
    setattr(logger, "_autofix_handlers", handlers)

    logging.getLogger(__name__).debug("Logging initialized (path=%s)", log_path)
    return session


def close_logging() -> None:
    """Flush, close and detach the handlers installed by configure_logging()."""

    logger = logging.getLogger()
    for h in getattr(logger, "_autofix_handlers", []):
        logger.removeHandler(h)
        h.close()
    for attr in ("_autofix_session", "_autofix_handlers"):
        if hasattr(logger, attr):
            delattr(logger, attr)
