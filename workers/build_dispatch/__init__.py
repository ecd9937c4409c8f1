"""
build_dispatch — release-build dispatcher with prebuilt fallback.

Probe the search path for the build toolchain; run its release build when
present, otherwise announce that the prebuilt artifact will be used.
No compilation logic, no packaging, no artifact discovery.
"""

__version__ = "0.1.0"
DISPATCHER_VERSION = "v0"
PACKAGE_NAME = "build_dispatch"
SCHEMA_VERSION = "0.1"
