"""
Dispatcher runner — probe, then build or fall back.

Ties the toolchain probe, the release-build invocation and the receipt
writer together.  ``dispatch`` returns the full receipt for callers that
want it; ``run`` returns only the exit status; ``main`` is the CLI.
"""
import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from build_dispatch.config import Settings
from build_dispatch.core.invoke import run_release_build
from build_dispatch.core.probe import resolve_toolchain
from build_dispatch.io.schema import DispatchBranch, DispatchReceipt, now_iso
from build_dispatch.io.writer import write_receipt
from build_dispatch.policy.profile import DispatchProfile

logger = logging.getLogger(__name__)


def dispatch(
    profile: Optional[DispatchProfile] = None,
    cwd: Optional[Path] = None,
    search_path: Optional[str] = None,
    output_dir: Optional[Path] = None,
) -> DispatchReceipt:
    """
    Run one dispatch and return its receipt.

    Parameters
    ----------
    profile : DispatchProfile, optional
        Toolchain to probe for.  Defaults to DispatchProfile.cargo().
    cwd : Path, optional
        Directory to build in.  Defaults to the current directory.
    search_path : str, optional
        PATH-style string to probe.  Defaults to the process PATH.
    output_dir : Path, optional
        Directory to write dispatch_receipt.json.  If None, nothing is
        written to disk.

    Returns
    -------
    DispatchReceipt
    """
    if profile is None:
        profile = DispatchProfile.cargo()
    work_dir = cwd if cwd is not None else Path.cwd()

    started_at = now_iso()
    t0 = time.monotonic()

    executable = resolve_toolchain(profile.toolchain_binary, search_path)

    if executable is None:
        print(profile.fallback_notice())
        branch = DispatchBranch.PREBUILT
        cmd = []
        exit_code = 0
    else:
        branch = DispatchBranch.BUILD
        cmd = profile.release_command(executable)
        exit_code = run_release_build(cmd, cwd=cwd)

    receipt = DispatchReceipt(
        profile_id=profile.profile_id,
        toolchain_binary=profile.toolchain_binary,
        toolchain_path=executable,
        branch=branch,
        command=cmd,
        cwd=str(work_dir),
        exit_code=exit_code,
        started_at=started_at,
        duration_ms=int((time.monotonic() - t0) * 1000),
    )
    logger.info(
        "Dispatch finished: branch=%s exit_code=%d", branch.value, exit_code
    )

    if output_dir:
        try:
            path = write_receipt(receipt, output_dir)
        except OSError as e:
            logger.error("Could not write receipt to %s: %s", output_dir, e)
        else:
            logger.debug("Receipt saved: %s", path)

    return receipt


def run(
    profile: Optional[DispatchProfile] = None,
    cwd: Optional[Path] = None,
    search_path: Optional[str] = None,
    output_dir: Optional[Path] = None,
) -> int:
    """Dispatch once and return the process exit status."""
    return dispatch(profile, cwd, search_path, output_dir).exit_code


# ── CLI ──────────────────────────────────────────────────────────────────────

def main(argv=None):
    """CLI entry point: takes no arguments, exits with the dispatch status."""
    parser = argparse.ArgumentParser(
        description=(
            "build_dispatch — run a release build if the toolchain is on "
            "PATH, otherwise fall back to the prebuilt artifact"
        ),
    )
    parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    output_dir = Path(settings.RECEIPT_DIR) if settings.RECEIPT_DIR else None
    sys.exit(run(DispatchProfile.from_settings(settings), output_dir=output_dir))


if __name__ == "__main__":
    main()
