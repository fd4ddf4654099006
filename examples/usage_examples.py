#!/usr/bin/env python3
"""
Example script showing how to use the toolchain finder as a library.
"""

from pathlib import Path

from toolchain_finder.models import ResolverConfig
from toolchain_finder.naming import make_toolchain_name
from toolchain_finder.reporting import export_search_report
from toolchain_finder.resolver import ToolchainResolver
from toolchain_finder.targets import current_target, ignored_packages_for


def example_latest_stable():
    """Example: Newest stable release usable on every Tier-1 target."""
    print("="*60)
    print("Example 1: Latest complete stable release")
    print("="*60)

    host = current_target()
    config = ResolverConfig(ignored_packages=ignored_packages_for("all", host))
    viable = ToolchainResolver().resolve(config, host)

    if viable is None:
        print("No viable stable build found")
        return
    print(f"Toolchain: {make_toolchain_name(viable, config.channel)}")
    print(f"Manifest date: {viable.date}")


def example_nightly_for_host():
    """Example: Newest nightly with the minimal profile on this host only."""
    print("\n" + "="*60)
    print("Example 2: Nightly for the current host")
    print("="*60)

    host = current_target()
    config = ResolverConfig(
        channel="nightly",
        profile="minimal",
        max_age=30,
        targets="current",
        ignored_packages=ignored_packages_for("current", host),
    )
    resolver = ToolchainResolver(show_progress=True)
    viable = resolver.resolve(config, host)

    if viable is not None:
        print(f"Toolchain: {make_toolchain_name(viable, config.channel)}")
    for evaluation in resolver.evaluations:
        print(f"  {evaluation.date}: {evaluation.status}")

    report = export_search_report(resolver.evaluations, Path("./output/example2"), "nightly")
    print(f"Search report saved to: {report}")


if __name__ == "__main__":
    example_latest_stable()
    example_nightly_for_host()
