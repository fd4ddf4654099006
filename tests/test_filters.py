"""Tests for manifest availability filtering."""

from datetime import date

from toolchain_finder.filters import is_viable, select_packages, unavailable_pairs
from toolchain_finder.models import Manifest, PackageInfo, PackageTargets
from toolchain_finder.targets import TIER_1_TARGETS


LINUX = "x86_64-unknown-linux-gnu"
MAC = "aarch64-apple-darwin"


def _manifest(packages):
    return Manifest(
        date=date(2024, 1, 10),
        packages={
            name: PackageTargets(
                version="1.75.0",
                targets={t: PackageInfo(available=a) for t, a in targets.items()},
            )
            for name, targets in packages.items()
        },
        profiles={"default": list(packages)},
    )


def test_empty_package_selection_is_viable():
    manifest = _manifest({"rustc": {LINUX: False}})

    assert is_viable(manifest, [], set(), TIER_1_TARGETS)
    assert is_viable(manifest, ["rustc"], {"rustc"}, TIER_1_TARGETS)


def test_unavailable_entry_makes_manifest_not_viable():
    manifest = _manifest({"rustc": {LINUX: False, MAC: True}, "cargo": {LINUX: True}})

    assert not is_viable(manifest, ["rustc", "cargo"], set(), TIER_1_TARGETS)
    assert unavailable_pairs(manifest, ["rustc", "cargo"], set(), TIER_1_TARGETS) == [
        ("rustc", LINUX)
    ]


def test_missing_target_entries_are_skipped():
    manifest = _manifest({"rustc": {LINUX: True}, "cargo": {}})

    assert is_viable(manifest, ["rustc", "cargo"], set(), TIER_1_TARGETS)


def test_out_of_scope_targets_are_not_checked():
    manifest = _manifest({"rustc": {LINUX: True, MAC: False}})

    assert is_viable(manifest, ["rustc"], set(), [LINUX])
    assert not is_viable(manifest, ["rustc"], set(), [LINUX, MAC])


def test_packages_missing_from_manifest_are_skipped():
    manifest = _manifest({"rustc": {LINUX: True}})

    assert is_viable(manifest, ["rustc", "rust-analyzer"], set(), TIER_1_TARGETS)


def test_manifest_without_any_targets_is_viable():
    manifest = _manifest({"rustc": {}, "cargo": {}})

    assert is_viable(manifest, ["rustc", "cargo"], set(), TIER_1_TARGETS)


def test_ignored_packages_never_affect_viability():
    manifest = _manifest({"rustc": {LINUX: True}, "rust-mingw": {LINUX: False}})

    assert is_viable(manifest, ["rustc", "rust-mingw"], {"rust-mingw"}, [LINUX])
    assert unavailable_pairs(manifest, ["rustc", "rust-mingw"], {"rust-mingw"}, [LINUX]) == []


def test_select_packages_keeps_profile_order():
    selected = select_packages(["rustc", "lldb-preview", "cargo"], {"lldb-preview"})

    assert selected == ["rustc", "cargo"]


def test_is_viable_is_idempotent():
    manifest = _manifest({"rustc": {LINUX: True}, "cargo": {MAC: False}})
    args = (manifest, ["rustc", "cargo"], set(), TIER_1_TARGETS)

    assert is_viable(*args) is is_viable(*args)
    assert is_viable(*args) is False
