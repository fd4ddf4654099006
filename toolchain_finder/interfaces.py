"""
Interfaces for manifest sources.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .models import Manifest


class ManifestSource(Protocol):
    """Locate and retrieve channel manifests."""

    def latest_url(self, channel: str) -> str:
        ...

    def dated_url(self, channel: str, manifest_date: date) -> str:
        ...

    def fetch(self, url: str) -> Optional[Manifest]:
        ...
