"""
Profile — which toolchain to probe for and how to ask it for a release build.

Binary names and subcommands are conventions of the surrounding project,
so they live here rather than in the core probe / invoke logic.
"""
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class DispatchProfile:
    """Describes the toolchain the dispatcher delegates to."""

    profile_id: str
    toolchain_binary: str
    toolchain_label: str
    build_args: Tuple[str, ...]
    notice_template: str = "{label} was not found, using prebuilt"

    def release_command(self, executable: str) -> List[str]:
        """argv for the release build, with *executable* as argv[0]."""
        return [executable, *self.build_args]

    def fallback_notice(self) -> str:
        return self.notice_template.format(label=self.toolchain_label)

    @classmethod
    def cargo(cls) -> "DispatchProfile":
        """The locked default profile: cargo build --release."""
        return cls(
            profile_id="cargo-release",
            toolchain_binary="cargo",
            toolchain_label="Cargo",
            build_args=("build", "--release"),
        )

    @classmethod
    def from_settings(cls, settings) -> "DispatchProfile":
        """Profile from a :class:`build_dispatch.config.Settings` instance."""
        return cls(
            profile_id=f"{settings.TOOLCHAIN_BINARY}-release",
            toolchain_binary=settings.TOOLCHAIN_BINARY,
            toolchain_label=settings.TOOLCHAIN_LABEL,
            build_args=tuple(settings.BUILD_ARGS),
        )
