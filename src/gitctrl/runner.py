#!/usr/bin/env python3
"""
runner - Subprocess execution for gitctrl.

Commands run to completion in a given directory with stdout and stderr merged
into a single text buffer. There is no timeout and no streaming: the caller
blocks until the process exits.
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional

from gitctrl.errors import CommandError

logger = logging.getLogger(__name__)

# Return code used when the command could not be started at all
LAUNCH_FAILURE = 127

Runner = Callable[[str, List[str], Path], subprocess.CompletedProcess]


def run_command(command: str, args: List[str], cwd: Path) -> subprocess.CompletedProcess:
    """
    Run `command args...` inside cwd and return the completed process.

    The combined output lands in `stdout`. Launch failures (missing binary,
    vanished directory) are reported as a completed process with return code
    127 and the OS error as output, so callers only ever check returncode.
    """
    argv = [command] + list(args)
    try:
        result = subprocess.run(
            argv,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
            encoding='utf-8',
            errors='replace'
        )
    except OSError as e:
        logger.error(f"Failed to launch {' '.join(argv)}: {e}")
        return subprocess.CompletedProcess(argv, LAUNCH_FAILURE, stdout=str(e))

    logger.debug(f"{' '.join(argv)} (cwd={cwd}) -> {result.returncode}")
    return result


def check(result: subprocess.CompletedProcess, context: Optional[str] = None) -> subprocess.CompletedProcess:
    """Raise CommandError if the process exited non-zero, else return it."""
    if result.returncode != 0:
        raise CommandError(result.args, result.returncode, result.stdout or "", context)
    return result
