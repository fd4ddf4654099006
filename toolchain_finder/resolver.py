"""
Backward search for the most recent viable channel manifest.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import AbstractSet, Callable, Iterator, List, Optional, Sequence, Tuple

from tqdm import tqdm

from .errors import ChannelNotFoundError, UnknownProfileError
from .fetcher import ManifestFetcher
from .filters import is_viable, unavailable_pairs
from .interfaces import ManifestSource
from .models import DateEvaluation, Manifest, ResolverConfig, ViableManifest
from .targets import targets_for
from .time_utils import candidate_dates


logger = logging.getLogger(__name__)


class ToolchainResolver:
    """Find the newest manifest whose profile packages are all available."""

    def __init__(
        self,
        fetcher: Optional[ManifestSource] = None,
        show_progress: bool = False,
        on_evaluation: Optional[Callable[[DateEvaluation], None]] = None,
    ):
        """Initialize the resolver.

        Args:
            fetcher: Manifest source, defaults to the public distribution server
            show_progress: Show a progress bar over candidate dates on stderr
            on_evaluation: Called with each candidate date's outcome
        """
        self.fetcher = fetcher if fetcher is not None else ManifestFetcher()
        self.show_progress = show_progress
        self.on_evaluation = on_evaluation
        self.evaluations: List[DateEvaluation] = []

    def resolve(self, config: ResolverConfig, host_target: str) -> Optional[ViableManifest]:
        """Run the search described by a resolver config."""
        return self.find_latest_viable_manifest(
            channel=config.channel,
            profile=config.profile,
            max_age=config.max_age,
            ignored_packages=config.ignored_packages,
            targets=targets_for(config.targets, host_target),
        )

    def find_latest_viable_manifest(
        self,
        channel: str,
        profile: str,
        max_age: int,
        ignored_packages: AbstractSet[str],
        targets: Sequence[str],
    ) -> Optional[ViableManifest]:
        """Walk back from the channel's latest manifest to the first viable one.

        Args:
            channel: Release channel name
            profile: Profile whose packages must be available
            max_age: Number of days to examine, counting the latest date
            ignored_packages: Packages excluded from the check
            targets: Target triples in scope

        Returns:
            The newest viable manifest, or None if no examined date qualifies

        Raises:
            ChannelNotFoundError: If the channel has no latest manifest
            UnknownProfileError: If a manifest does not define ``profile``
            ManifestFetchError: If a request fails
            ManifestFormatError: If a manifest cannot be decoded
        """
        self.evaluations = []

        latest_url = self.fetcher.latest_url(channel)
        latest = self.fetcher.fetch(latest_url)
        if latest is None:
            raise ChannelNotFoundError(channel)
        logger.info("Latest %s manifest is dated %s", channel, latest.date)

        with tqdm(
            total=max(max_age, 1),
            desc=f"Searching {channel}",
            unit="day",
            disable=not self.show_progress,
            leave=False,
        ) as pbar:
            for candidate, url, manifest in self._iter_manifests(channel, latest, latest_url, max_age):
                pbar.update(1)
                if manifest is None:
                    self._record(DateEvaluation(date=candidate, status="absent", url=url))
                    continue

                packages = self.resolve_profile(manifest, profile)
                if is_viable(manifest, packages, ignored_packages, targets):
                    self._record(DateEvaluation(date=manifest.date, status="viable", url=url))
                    return ViableManifest(manifest=manifest, channel=channel, profile=profile)

                missing = unavailable_pairs(manifest, packages, ignored_packages, targets)
                self._record(
                    DateEvaluation(
                        date=manifest.date,
                        status="not-viable",
                        url=url,
                        unavailable=tuple(missing),
                    )
                )

        logger.info("No viable %s manifest within %d days of %s", channel, max_age, latest.date)
        return None

    def resolve_profile(self, manifest: Manifest, profile: str) -> List[str]:
        """Return the package names a manifest lists for ``profile``."""
        try:
            return list(manifest.profiles[profile])
        except KeyError:
            raise UnknownProfileError(profile, manifest.profiles) from None

    def _iter_manifests(
        self,
        channel: str,
        latest: Manifest,
        latest_url: str,
        max_age: int,
    ) -> Iterator[Tuple[date, str, Optional[Manifest]]]:
        # Fetches lazily: nothing older is requested once the caller stops.
        for candidate in candidate_dates(latest.date, max_age):
            if candidate == latest.date:
                yield candidate, latest_url, latest
                continue
            url = self.fetcher.dated_url(channel, candidate)
            yield candidate, url, self.fetcher.fetch(url)

    def _record(self, evaluation: DateEvaluation) -> None:
        if evaluation.status == "not-viable":
            pairs = ", ".join(f"{package} on {target}" for package, target in evaluation.unavailable)
            logger.info("%s is not viable: unavailable %s", evaluation.date, pairs)
        else:
            logger.info("%s is %s", evaluation.date, evaluation.status)
        self.evaluations.append(evaluation)
        if self.on_evaluation is not None:
            self.on_evaluation(evaluation)
