"""
Availability filtering of manifests against a profile and target set.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Iterator, List, Sequence, Tuple

from .models import Manifest, PackageInfo


def select_packages(
    in_scope_packages: Iterable[str],
    ignored_packages: AbstractSet[str],
) -> List[str]:
    """Return the profile packages that take part in the availability check."""
    return [package for package in in_scope_packages if package not in ignored_packages]


def iter_availability(
    manifest: Manifest,
    in_scope_packages: Iterable[str],
    ignored_packages: AbstractSet[str],
    in_scope_targets: Sequence[str],
) -> Iterator[Tuple[str, str, PackageInfo]]:
    """Yield ``(package, target, info)`` for every pair with an explicit entry.

    Packages missing from the manifest and targets missing from a package
    carry no availability information and are skipped.
    """
    for package in select_packages(in_scope_packages, ignored_packages):
        package_targets = manifest.packages.get(package)
        if package_targets is None:
            continue
        for target in in_scope_targets:
            info = package_targets.targets.get(target)
            if info is not None:
                yield package, target, info


def is_viable(
    manifest: Manifest,
    in_scope_packages: Iterable[str],
    ignored_packages: AbstractSet[str],
    in_scope_targets: Sequence[str],
) -> bool:
    """Check that every observed package/target pair is available.

    A manifest with no observed pairs at all is viable.
    """
    return all(
        info.available
        for _, _, info in iter_availability(
            manifest, in_scope_packages, ignored_packages, in_scope_targets
        )
    )


def unavailable_pairs(
    manifest: Manifest,
    in_scope_packages: Iterable[str],
    ignored_packages: AbstractSet[str],
    in_scope_targets: Sequence[str],
) -> List[Tuple[str, str]]:
    """List the ``(package, target)`` pairs explicitly marked unavailable."""
    return [
        (package, target)
        for package, target, info in iter_availability(
            manifest, in_scope_packages, ignored_packages, in_scope_targets
        )
        if not info.available
    ]
