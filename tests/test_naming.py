"""Tests for toolchain naming."""

from datetime import date

from toolchain_finder.models import Manifest, ViableManifest
from toolchain_finder.naming import get_rust_version, make_toolchain_name


def _viable(manifest, channel="stable"):
    return ViableManifest(manifest=manifest, channel=channel, profile="default")


def test_stable_uses_rust_version(manifest_factory):
    manifest = manifest_factory(date(2024, 1, 9), rust_version="1.75.0 (abcdef 2024-01-09)")

    assert make_toolchain_name(_viable(manifest), "stable", force_date=False) == "1.75.0"


def test_force_date_uses_date_stamp(manifest_factory):
    manifest = manifest_factory(date(2024, 1, 9), rust_version="1.75.0 (abcdef 2024-01-09)")

    assert make_toolchain_name(_viable(manifest), "stable", force_date=True) == "stable-2024-01-09"


def test_other_channels_use_date_stamp(manifest_factory):
    manifest = manifest_factory(date(2024, 1, 9), rust_version="1.77.0-nightly (abcdef 2024-01-08)")

    assert make_toolchain_name(_viable(manifest, "nightly"), "nightly") == "nightly-2024-01-09"


def test_prerelease_suffix_is_dropped(manifest_factory):
    manifest = manifest_factory(date(2024, 1, 9), rust_version="1.76.0-beta.5 (abcdef 2024-01-08)")

    assert get_rust_version(manifest) == "1.76.0"


def test_missing_rust_package_falls_back_to_date(manifest_factory):
    manifest = manifest_factory(date(2024, 1, 9))
    packages = {k: v for k, v in manifest.packages.items() if k != "rust"}
    manifest = Manifest(date=manifest.date, packages=packages, profiles=manifest.profiles)

    assert get_rust_version(manifest) is None
    assert make_toolchain_name(_viable(manifest), "stable") == "stable-2024-01-09"


def test_unversioned_rust_package_falls_back_to_date(manifest_factory):
    manifest = manifest_factory(date(2024, 1, 9), rust_version="unknown")

    assert make_toolchain_name(_viable(manifest), "stable") == "stable-2024-01-09"
