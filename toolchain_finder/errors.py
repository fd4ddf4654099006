"""
Exceptions raised while resolving a toolchain.
"""

from __future__ import annotations

from typing import Optional


class ToolchainFinderError(Exception):
    """Base class for all resolver failures."""


class ManifestFetchError(ToolchainFinderError):
    """Raised when a manifest request fails for any reason other than 404."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ManifestFormatError(ToolchainFinderError):
    """Raised when a manifest body is not a valid channel document."""


class ChannelNotFoundError(ToolchainFinderError):
    """Raised when a channel has no latest manifest."""

    def __init__(self, channel: str):
        super().__init__(f"no manifest found for release channel {channel}")
        self.channel = channel


class UnknownProfileError(ToolchainFinderError):
    """Raised when a manifest does not define the requested profile."""

    def __init__(self, profile: str, available):
        known = ", ".join(sorted(available)) or "none"
        super().__init__(f"unknown profile {profile!r} (manifest defines: {known})")
        self.profile = profile


class NoViableBuildError(ToolchainFinderError):
    """Raised by the command line when the search finds nothing."""

    def __init__(self, channel: str):
        super().__init__(f"no viable {channel} build found")
        self.channel = channel


class ReportError(ToolchainFinderError):
    """Raised when the search report cannot be written."""
