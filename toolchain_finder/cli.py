"""
Command-line interface for the toolchain finder.
"""

import argparse
import logging
import sys
from pathlib import Path

from .errors import NoViableBuildError, ReportError, ToolchainFinderError
from .models import PROFILES, TARGET_MODES, ResolverConfig
from .naming import make_toolchain_name
from .reporting import build_result, export_search_report, print_summary, save_result_json
from .resolver import ToolchainResolver
from .targets import current_target, ignored_packages_for


logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolchain-finder",
        description="Determines the last known complete build of a Rust toolchain."
    )

    parser.add_argument(
        "-c", "--channel",
        default="stable",
        help="Release channel to use. Default: stable"
    )

    parser.add_argument(
        "-p", "--profile",
        choices=PROFILES,
        default="default",
        help="Which package profile to use. Default: default"
    )

    parser.add_argument(
        "-a", "--max-age",
        type=positive_int,
        default=90,
        help="Number of days back to search for viable builds, relative to "
             "the latest release of the channel. Default: 90"
    )

    parser.add_argument(
        "-t", "--targets",
        choices=TARGET_MODES,
        default="all",
        help="Which set of targets to filter by, either all Tier-1 targets "
             "or only the current target. Default: all"
    )

    parser.add_argument(
        "-d", "--force-date",
        action="store_true",
        help="Use date-stamped toolchains like stable-2019-04-25 instead of "
             "version numbers for stable releases"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every examined date and each request"
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while searching"
    )

    parser.add_argument(
        "--report-dir",
        type=Path,
        default=None,
        help="Write a CSV search report and a JSON result to this directory"
    )

    return parser


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def print_error(error: BaseException) -> None:
    """Print an error followed by its chain of causes."""
    print(error, file=sys.stderr)
    cause = error.__cause__ or (None if error.__suppress_context__ else error.__context__)
    while cause is not None:
        print(f"\tcaused by: {cause}", file=sys.stderr)
        cause = cause.__cause__ or (None if cause.__suppress_context__ else cause.__context__)


def run(args: argparse.Namespace) -> str:
    """Resolve the toolchain name for parsed arguments."""
    host = current_target()
    config = ResolverConfig(
        channel=args.channel,
        profile=args.profile,
        max_age=args.max_age,
        targets=args.targets,
        ignored_packages=ignored_packages_for(args.targets, host),
        force_date=args.force_date,
    )
    logger.debug("Resolving with %s on host %s", config, host)

    resolver = ToolchainResolver(show_progress=args.progress)
    viable = resolver.resolve(config, host)
    toolchain = None
    if viable is not None:
        toolchain = make_toolchain_name(viable, config.channel, config.force_date)

    print_summary(config.channel, config.profile, toolchain, resolver.evaluations)
    if args.report_dir is not None:
        result = build_result(config.channel, config.profile, toolchain, resolver.evaluations)
        try:
            result_file = save_result_json(result, args.report_dir, config.channel)
            report_file = export_search_report(resolver.evaluations, args.report_dir, config.channel)
        except OSError as e:
            raise ReportError(f"error writing report to {args.report_dir}") from e
        logger.info("Report saved to: %s, %s", result_file, report_file)

    if toolchain is None:
        raise NoViableBuildError(config.channel)
    return toolchain


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        toolchain = run(args)
    except ToolchainFinderError as e:
        print_error(e)
        sys.exit(1)

    print(toolchain)


if __name__ == "__main__":
    main()
