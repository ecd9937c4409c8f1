"""
Toolchain probe — is the build tool on the executable search path?

Pure lookups against PATH (or an explicit search path).  Nothing is
cached: every call re-reads the filesystem, so repeated dispatches see
the host as it is now.
"""
import logging
import shutil
from typing import Optional

logger = logging.getLogger(__name__)


def resolve_toolchain(binary: str, search_path: Optional[str] = None) -> Optional[str]:
    """
    Return the absolute path of *binary*, or None if it is not found.

    *search_path* uses the os.pathsep-joined PATH format; None means the
    current process PATH.
    """
    found = shutil.which(binary, path=search_path)
    if found is None:
        logger.debug("Toolchain %r not on search path", binary)
    else:
        logger.debug("Toolchain %r resolved to %s", binary, found)
    return found


def toolchain_available(binary: str, search_path: Optional[str] = None) -> bool:
    """True if *binary* is an executable on the search path."""
    return resolve_toolchain(binary, search_path) is not None
