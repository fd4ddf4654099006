"""
Static platform data and host target detection.
"""

from __future__ import annotations

import platform
import sys
import sysconfig
from typing import FrozenSet, Optional, Sequence, Tuple


# https://doc.rust-lang.org/nightly/rustc/platform-support.html
TIER_1_TARGETS: Tuple[str, ...] = (
    "aarch64-apple-darwin",
    "aarch64-pc-windows-msvc",
    "aarch64-unknown-linux-gnu",
    "i686-pc-windows-msvc",
    "i686-unknown-linux-gnu",
    "x86_64-pc-windows-gnu",
    "x86_64-pc-windows-msvc",
    "x86_64-unknown-linux-gnu",
)

BASE_IGNORED_PACKAGES: FrozenSet[str] = frozenset({"lldb-preview", "rust-mingw"})

# Packages that only exist on some hosts; kept in scope when the search is
# narrowed to one of these hosts.
HOST_SPECIFIC_PACKAGES = {
    "i686-apple-darwin": frozenset({"lldb-preview"}),
    "x86_64-apple-darwin": frozenset({"lldb-preview"}),
    "i686-pc-windows-gnu": frozenset({"rust-mingw"}),
    "x86_64-pc-windows-gnu": frozenset({"rust-mingw"}),
}

_ARCH_ALIASES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "i386": "i686",
    "i686": "i686",
    "x86": "i686",
}


def current_target(machine: Optional[str] = None, system: Optional[str] = None) -> str:
    """Return the target triple of the running host."""
    machine = (machine or platform.machine()).lower()
    system = system or sys.platform
    arch = _ARCH_ALIASES.get(machine, machine)

    if system.startswith("linux"):
        return f"{arch}-unknown-linux-gnu"
    if system == "darwin":
        return f"{arch}-apple-darwin"
    if system in ("win32", "cygwin"):
        if sysconfig.get_platform().startswith("mingw"):
            return f"{arch}-pc-windows-gnu"
        return f"{arch}-pc-windows-msvc"
    return f"{arch}-unknown-{system}"


def ignored_packages_for(mode: str, target: str) -> FrozenSet[str]:
    """Return the packages left out of the availability check.

    Args:
        mode: Target selection, ``all`` or ``current``
        target: Triple of the host the search runs for

    Returns:
        Package names to ignore
    """
    if mode == "current":
        return BASE_IGNORED_PACKAGES - HOST_SPECIFIC_PACKAGES.get(target, frozenset())
    return BASE_IGNORED_PACKAGES


def targets_for(mode: str, target: str) -> Sequence[str]:
    """Return the target triples in scope for a target selection mode."""
    if mode == "all":
        return TIER_1_TARGETS
    if mode == "current":
        return (target,)
    raise ValueError(f"Unsupported target mode: {mode}")
