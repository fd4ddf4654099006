"""
Core data models for release manifests and search results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from .errors import ManifestFormatError
from .time_utils import parse_manifest_date


PROFILES = ("complete", "default", "minimal")
TARGET_MODES = ("all", "current")


@dataclass(frozen=True)
class PackageInfo:
    """Availability of one package on one target."""

    available: bool


@dataclass(frozen=True)
class PackageTargets:
    """A package's version and its per-target availability."""

    version: str
    targets: Mapping[str, PackageInfo]


@dataclass(frozen=True)
class Manifest:
    """One day's published release metadata for a channel."""

    date: date
    packages: Mapping[str, PackageTargets]
    profiles: Mapping[str, Tuple[str, ...]]

    @classmethod
    def from_dict(cls, document: Mapping) -> "Manifest":
        """Build a manifest from a decoded channel document.

        Args:
            document: Decoded TOML document

        Returns:
            Manifest

        Raises:
            ManifestFormatError: If a required key is missing or mistyped
        """
        if "date" not in document:
            raise ManifestFormatError("manifest has no date")
        manifest_date = parse_manifest_date(document["date"])
        if manifest_date is None:
            raise ManifestFormatError(f"invalid manifest date: {document['date']!r}")

        packages: Dict[str, PackageTargets] = {}
        for name, data in _require_table(document, "pkg", "manifest").items():
            packages[name] = _parse_package(name, data)

        profiles: Dict[str, Tuple[str, ...]] = {}
        for name, members in _require_table(document, "profiles", "manifest").items():
            if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
                raise ManifestFormatError(f"profile {name} is not a list of package names")
            profiles[name] = tuple(members)

        return cls(date=manifest_date, packages=packages, profiles=profiles)


def _require_table(data: Mapping, key: str, context: str) -> Mapping:
    if key not in data:
        raise ManifestFormatError(f"{context} has no {key!r} table")
    value = data[key]
    if not isinstance(value, Mapping):
        raise ManifestFormatError(f"{context} {key!r} is not a table")
    return value


def _parse_package(name: str, data) -> PackageTargets:
    if not isinstance(data, Mapping):
        raise ManifestFormatError(f"package {name} is not a table")
    version = data.get("version")
    if not isinstance(version, str):
        raise ManifestFormatError(f"package {name} has no version")

    targets: Dict[str, PackageInfo] = {}
    for triple, info in _require_table(data, "target", f"package {name}").items():
        available = info.get("available") if isinstance(info, Mapping) else None
        if not isinstance(available, bool):
            raise ManifestFormatError(
                f"package {name} target {triple} has no availability flag"
            )
        targets[triple] = PackageInfo(available=available)
    return PackageTargets(version=version, targets=targets)


@dataclass(frozen=True)
class ResolverConfig:
    """Validated settings handed from the command line to the resolver."""

    channel: str = "stable"
    profile: str = "default"
    max_age: int = 90
    targets: str = "all"
    ignored_packages: FrozenSet[str] = frozenset()
    force_date: bool = False


@dataclass(frozen=True)
class ViableManifest:
    """The chosen manifest with the context needed to name it."""

    manifest: Manifest
    channel: str
    profile: str

    @property
    def date(self) -> date:
        return self.manifest.date


@dataclass(frozen=True)
class DateEvaluation:
    """Outcome of examining one candidate date during the search."""

    date: date
    status: str
    url: Optional[str] = None
    unavailable: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
