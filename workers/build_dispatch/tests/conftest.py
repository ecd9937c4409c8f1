"""
Test fixtures for build_dispatch.

Provides fake toolchain executables (small POSIX shell scripts written
into a private bin directory) that record each invocation's arguments
and exit with a chosen status.
"""
from __future__ import annotations

import stat
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from build_dispatch.policy.profile import DispatchProfile

FAKE_BINARY = "fakecargo"


# ── Fake toolchain factory ───────────────────────────────────────────────────

def write_fake_toolchain(
    bin_dir: Path,
    log_path: Path,
    exit_code: int = 0,
    name: str = FAKE_BINARY,
    body: str | None = None,
) -> Path:
    """
    Write an executable *name* into *bin_dir*.

    Each run appends its arguments as one line to *log_path*, then runs
    *body* (default: ``exit <exit_code>``).
    """
    bin_dir.mkdir(parents=True, exist_ok=True)
    if body is None:
        body = f"exit {exit_code}"
    script = textwrap.dedent(f"""\
        #!/bin/sh
        echo "$@" >> "{log_path}"
        {body}
    """)
    path = bin_dir / name
    path.write_text(script)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def read_invocations(log_path: Path) -> list[str]:
    """Argument lines recorded by the fake toolchain (empty if never run)."""
    if not log_path.exists():
        return []
    return log_path.read_text().splitlines()


# ── Fixtures ─────────────────────────────────────────────────────────────────

@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def empty_bin_dir(tmp_path: Path) -> Path:
    """A search path with nothing on it."""
    d = tmp_path / "empty_bin"
    d.mkdir()
    return d


@pytest.fixture
def invocation_log(tmp_path: Path) -> Path:
    return tmp_path / "invocations.log"


@pytest.fixture
def make_toolchain(bin_dir: Path, invocation_log: Path) -> Callable[..., Path]:
    """Factory: make_toolchain(exit_code=0, body=None) -> script path."""
    def _make(exit_code: int = 0, body: str | None = None) -> Path:
        return write_fake_toolchain(bin_dir, invocation_log, exit_code, body=body)
    return _make


@pytest.fixture
def fake_profile() -> DispatchProfile:
    """Profile pointing at the fake toolchain, same args as the cargo profile."""
    return DispatchProfile(
        profile_id="fakecargo-release",
        toolchain_binary=FAKE_BINARY,
        toolchain_label="Cargo",
        build_args=("build", "--release"),
    )


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    d = tmp_path / "project"
    d.mkdir()
    return d


@pytest.fixture
def fake_binary() -> str:
    """Name of the fake toolchain executable."""
    return FAKE_BINARY


@pytest.fixture
def invocations(invocation_log: Path) -> Callable[[], list[str]]:
    """Reader: invocations() -> argument lines recorded so far."""
    return lambda: read_invocations(invocation_log)
