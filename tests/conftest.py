"""Shared fixtures for toolchain_finder tests."""

from datetime import date
from typing import Dict, Iterable, Optional, Tuple

import pytest

from toolchain_finder.models import Manifest, PackageInfo, PackageTargets
from toolchain_finder.targets import TIER_1_TARGETS


PROFILE_TABLE = {
    "minimal": ["rustc", "cargo", "rust-std"],
    "default": ["rustc", "cargo", "rust-std", "rust-docs", "rustfmt", "clippy"],
    "complete": [
        "rustc", "cargo", "rust-std", "rust-docs", "rustfmt", "clippy",
        "rust-src", "lldb-preview", "rust-mingw",
    ],
}


def build_manifest(
    day: date,
    unavailable: Iterable[Tuple[str, str]] = (),
    rust_version: str = "1.75.0 (abcdef 2024-01-09)",
    targets: Iterable[str] = TIER_1_TARGETS,
    profiles: Optional[Dict] = None,
) -> Manifest:
    unavailable = set(unavailable)
    targets = list(targets)
    packages = {}
    for name in ["rust"] + PROFILE_TABLE["complete"]:
        packages[name] = PackageTargets(
            version=rust_version,
            targets={
                target: PackageInfo(available=(name, target) not in unavailable)
                for target in targets
            },
        )
    return Manifest(
        date=day,
        packages=packages,
        profiles=PROFILE_TABLE if profiles is None else profiles,
    )


class FakeFetcher:
    """In-memory manifest source that records every request."""

    base_url = "https://dist.test"

    def __init__(self, latest: Optional[Manifest], dated: Optional[Dict] = None):
        self.latest = latest
        self.dated = dated or {}
        self.requests = []

    def latest_url(self, channel):
        return f"{self.base_url}/channel-rust-{channel}.toml"

    def dated_url(self, channel, manifest_date):
        return f"{self.base_url}/{manifest_date.isoformat()}/channel-rust-{channel}.toml"

    def fetch(self, url):
        self.requests.append(url)
        if url.endswith(".toml") and url.count("/") == 3:
            return self.latest
        day = date.fromisoformat(url.split("/")[3])
        result = self.dated.get(day)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def manifest_factory():
    return build_manifest


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
