from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence

from ..errors import CommandFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def privileged(argv: Sequence[str]) -> list[str]:
    """Prefix argv with sudo unless we already run as root."""

    if os.geteuid() == 0:
        return list(argv)
    return ["sudo", *argv]


def _stream(argv_list: list[str]) -> CmdResult:
    # apt output is long-running; forward it line by line so it lands in the log as it happens.
    lines: list[str] = []
    with subprocess.Popen(
        argv_list,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        bufsize=1,
    ) as p:
        for line in p.stdout or ():
            line = line.rstrip("\n")
            lines.append(line)
            logger.info("%s", line)
        returncode = p.wait()
    return CmdResult(argv=argv_list, returncode=returncode, stdout="\n".join(lines), stderr="")


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    capture: bool = False,
    input_text: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always echoes the command.
    - dry_run logs but does not execute.
    - capture=True collects stdout/stderr (queries); otherwise output is
      streamed into the log.
    - check=True raises CommandFailed on a non-zero exit status.
    """

    argv_list = list(argv)
    logger.info("+ %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    try:
        if capture or input_text is not None:
            p = subprocess.run(
                argv_list,
                input=input_text,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
            r = CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout, stderr=p.stderr)
        else:
            r = _stream(argv_list)
    except OSError as e:
        # Same status a shell reports for a command it cannot find or execute.
        logger.error("%s", e)
        raise CommandFailed(argv_list, 127, str(e)) from e

    if r.stderr:
        if r.returncode != 0:
            logger.warning("%s", r.stderr.strip())
        else:
            logger.debug("STDERR %s", r.stderr.strip())

    if check and r.returncode != 0:
        raise CommandFailed(argv_list, r.returncode, r.stderr or r.stdout)

    return r
