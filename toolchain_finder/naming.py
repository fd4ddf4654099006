"""
Toolchain name derivation.
"""

from __future__ import annotations

import re
from typing import Optional

from .models import Manifest, ViableManifest


_RUST_VERSION_RE = re.compile(r"^(\d+\.\d+\.\d+)")


def get_rust_version(manifest: Manifest) -> Optional[str]:
    """Return the ``MAJOR.MINOR.PATCH`` part of the ``rust`` package version."""
    package = manifest.packages.get("rust")
    if package is None:
        return None
    match = _RUST_VERSION_RE.match(package.version)
    if match is None:
        return None
    return match.group(1)


def make_toolchain_name(viable: ViableManifest, channel: str, force_date: bool = False) -> str:
    """Name the toolchain for a viable manifest.

    Stable releases are named by version (``1.75.0``) unless ``force_date``
    is set; everything else is date-stamped (``nightly-2024-01-09``).
    """
    if not force_date and channel == "stable":
        version = get_rust_version(viable.manifest)
        if version is not None:
            return version
    return f"{channel}-{viable.manifest.date.isoformat()}"
