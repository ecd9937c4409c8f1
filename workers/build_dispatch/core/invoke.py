"""
Release-build invocation — one synchronous child process.

The child inherits stdout/stderr so the toolchain's own output reaches
the terminal unchanged.  Only the exit status comes back.
"""
import logging
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Shell convention for "command could not be executed"
EXIT_NOT_EXECUTABLE = 127
SIGNAL_EXIT_BASE = 128


def normalize_returncode(returncode: int) -> int:
    """Map Popen's ``-signum`` for signal deaths onto ``128 + signum``."""
    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


def run_release_build(cmd: List[str], cwd: Optional[Path] = None) -> int:
    """
    Run *cmd* in *cwd* (default: current directory) and return its exit status.

    Non-zero statuses are returned verbatim, never retried.  If the
    executable cannot be launched at all, the failure is logged and
    ``EXIT_NOT_EXECUTABLE`` is returned.
    """
    logger.info("Running release build: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, cwd=str(cwd) if cwd is not None else None)
    except OSError as e:
        logger.error("Could not execute %s: %s", cmd[0], e)
        return EXIT_NOT_EXECUTABLE

    code = normalize_returncode(result.returncode)
    if code != 0:
        logger.info("Release build exited with status %d", code)
    return code
