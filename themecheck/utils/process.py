"""Subprocess helpers for delegated tools."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)


def run_command(command: Sequence[str], cwd: Path, timeout: float) -> Tuple[int, str]:
    """Run ``command`` and return its exit code with combined stdout/stderr.

    Raises ``subprocess.TimeoutExpired`` when the timeout elapses and
    ``OSError`` when the executable cannot be started.
    """

    logger.debug("Running %s in %s (timeout %ss)", " ".join(command), cwd, timeout)
    proc = subprocess.run(
        list(command),
        cwd=str(cwd),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding="utf-8",
        errors="replace",
        timeout=timeout,
    )
    logger.debug("%s exited with %s", command[0], proc.returncode)
    return proc.returncode, proc.stdout or ""
