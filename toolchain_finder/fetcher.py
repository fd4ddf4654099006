"""
Channel manifest retrieval from the distribution server.
"""

from __future__ import annotations

import logging
import tomllib
from datetime import date
from typing import Optional

import requests

from .errors import ManifestFetchError, ManifestFormatError
from .interfaces import ManifestSource
from .models import Manifest


logger = logging.getLogger(__name__)

DIST_URL = "https://static.rust-lang.org/dist"
DEFAULT_TIMEOUT = 30


class ManifestFetcher(ManifestSource):
    """Fetch and decode channel manifests over HTTP."""

    def __init__(
        self,
        base_url: str = DIST_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def latest_url(self, channel: str) -> str:
        return f"{self.base_url}/channel-rust-{channel}.toml"

    def dated_url(self, channel: str, manifest_date: date) -> str:
        return f"{self.base_url}/{manifest_date.isoformat()}/channel-rust-{channel}.toml"

    def fetch(self, url: str) -> Optional[Manifest]:
        """Fetch a manifest.

        Args:
            url: Manifest URL

        Returns:
            The decoded manifest, or None if the server has no manifest there

        Raises:
            ManifestFetchError: On transport errors and unexpected statuses
            ManifestFormatError: If the body is not a channel manifest
        """
        logger.debug("Fetching manifest %s", url)
        try:
            with self.session.get(url, timeout=self.timeout) as response:
                if response.status_code == 404:
                    logger.info("No manifest published at %s", url)
                    return None
                if response.status_code != 200:
                    raise ManifestFetchError(
                        f"error getting manifest from {url}: HTTP {response.status_code}",
                        url=url,
                        status_code=response.status_code,
                    )
                body = response.content
        except requests.RequestException as e:
            raise ManifestFetchError(f"error making request to {url}", url=url) from e

        return self.parse(body, url)

    def parse(self, body: bytes, url: str) -> Manifest:
        """Decode a manifest body fetched from ``url``."""
        try:
            document = tomllib.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise ManifestFormatError(f"error reading manifest from {url}") from e
        try:
            return Manifest.from_dict(document)
        except ManifestFormatError as e:
            raise ManifestFormatError(f"error reading manifest from {url}") from e
