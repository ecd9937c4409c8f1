"""
Schema — Pydantic model for the dispatch receipt.

One receipt per dispatch: which branch was taken, what was run, and the
exit status handed back to the caller.

Runtime contract fields (present in every receipt):
  package_name, dispatcher_version, profile_id, schema_version.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from build_dispatch import DISPATCHER_VERSION, PACKAGE_NAME, SCHEMA_VERSION


class DispatchBranch(str, Enum):
    """Which side of the fork a dispatch took."""
    BUILD = "BUILD"
    PREBUILT = "PREBUILT"


class DispatchReceipt(BaseModel):
    """dispatch_receipt.json — record of one dispatcher run."""

    package_name: str = PACKAGE_NAME
    dispatcher_version: str = DISPATCHER_VERSION
    schema_version: str = SCHEMA_VERSION
    profile_id: str

    toolchain_binary: str
    toolchain_path: Optional[str] = None   # None on the PREBUILT branch

    branch: DispatchBranch
    command: List[str] = Field(default_factory=list)
    cwd: str
    exit_code: int

    started_at: str
    duration_ms: int = 0


def now_iso() -> str:
    """Current UTC time as ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()
