"""Command line interface."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .core.config import (
    CollisionPolicy,
    DestinationMap,
    SorterConfig,
    load_destination_map,
)
from .core.errors import OrganizerError
from .core.protocols import ProgressReporter
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter
from .services.classifier import ExtensionClassifier
from .services.file_ops import FileManager
from .services.processor import Organizer, OrganizerDependencies
from .services.scanner import DirectoryScanner


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="typesorter",
        description="Move files into Images, Documents and Audio folders by extension.",
    )

    parser.add_argument(
        "-s", "--source",
        type=Path,
        required=True,
        help="Source directory to scan (not recursive)",
    )

    # Where to put files: a base directory or an explicit config file
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "-d", "--destination",
        type=Path,
        help="Base destination directory (Images/, Documents/, Audio/ are created under it)",
    )
    target.add_argument(
        "-c", "--config",
        type=Path,
        help="TOML config file with a [directories] table (images, documents, audio)",
    )

    parser.add_argument(
        "--on-conflict",
        type=str,
        choices=[policy.value for policy in CollisionPolicy],
        default=CollisionPolicy.SKIP.value,
        help="What to do when the destination already has a file with the same name "
             "(default: skip)",
    )

    # Output options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def resolve_destinations(args: argparse.Namespace) -> DestinationMap:
    """Build the destination map from either --destination or --config.

    Raises:
        ConfigError: If the config file is unusable.
    """
    if args.config is not None:
        return load_destination_map(args.config)
    return DestinationMap.from_base(args.destination)


def build_config(args: argparse.Namespace) -> SorterConfig:
    """Resolve everything needed for a run. Touches no files."""
    return SorterConfig(
        source=args.source,
        destinations=resolve_destinations(args),
        collision_policy=CollisionPolicy(args.on_conflict),
    )


def run(config: SorterConfig, reporter: ProgressReporter) -> int:
    """Run the organizer with real dependencies."""
    reporter.print_header("typesorter")
    items = {"Source": str(config.source)}
    for category, path in config.destinations.as_dict().items():
        items[category.value] = str(path)
    items["On Conflict"] = config.collision_policy.value
    reporter.print_config(items)

    deps = OrganizerDependencies(
        scanner=DirectoryScanner(),
        classifier=ExtensionClassifier(),
        file_manager=FileManager(collision_policy=config.collision_policy),
        progress=reporter,
    )
    organizer = Organizer(config=config, deps=deps)
    stats = organizer.process()
    reporter.print_stats(stats)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Create reporter
    if args.quiet:
        reporter = QuietProgressReporter()
    else:
        reporter = RichProgressReporter(verbose=args.verbose)

    try:
        config = build_config(args)
        return run(config, reporter)
    except KeyboardInterrupt:
        # Clean exit on Ctrl+C - no stack trace
        return 130
    except (OrganizerError, OSError) as e:
        reporter.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
