"""
followcover.cli - Command-line interface.

Main entry point for the followcover CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from followcover import __version__
from followcover.commands import config_cmd, cover, degrees, export, stats


def _non_negative_int(value: str) -> int:
    """argparse type for counts that must be zero or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def _add_edge_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "edge_file",
        type=Path,
        help="Edge list: one '<follower> <followed>' pair per line",
        metavar="EDGE_FILE",
    )


def _add_json_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="followcover",
        description="Greedy covering sets for directed follow networks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  followcover stats data/follows.txt         # Vertex and edge counts
  followcover top data/follows.txt -n 20     # 20 most followed accounts
  followcover cover data/follows.txt         # Greedy covering set
  followcover export data/follows.txt --format csv --output graph.csv

Configuration:
  followcover config path                    # Show config file location
  followcover config show                    # View effective settings

For detailed command help: followcover <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"followcover {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show vertex, edge, and followed-vertex counts",
    )
    _add_edge_file_argument(stats_parser)
    _add_json_argument(stats_parser)

    # degrees command
    degrees_parser = subparsers.add_parser(
        "degrees",
        help="List every vertex with its in-degree ('-' if never followed)",
    )
    _add_edge_file_argument(degrees_parser)

    # top command
    top_parser = subparsers.add_parser(
        "top",
        help="Show the vertices with the highest in-degrees",
    )
    _add_edge_file_argument(top_parser)
    top_parser.add_argument(
        "-n",
        "--count",
        type=_non_negative_int,
        help="Number of vertices to show (default: report.top)",
        metavar="N",
    )
    top_parser.add_argument(
        "--ascending",
        action="store_true",
        help="Show the lowest in-degrees first",
    )
    _add_json_argument(top_parser)

    # cover command
    cover_parser = subparsers.add_parser(
        "cover",
        help="Compute a greedy covering set",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Every vertex in the result is either in the set or follows a member of it.
Vertices nobody follows are not considered by the greedy walk.
""",
    )
    _add_edge_file_argument(cover_parser)
    _add_json_argument(cover_parser)

    # export command
    export_parser = subparsers.add_parser(
        "export",
        help="Export the adjacency mapping",
    )
    _add_edge_file_argument(export_parser)
    export_parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output format (default: json)",
    )
    export_parser.add_argument(
        "--output",
        type=Path,
        help="Output file path (default: stdout)",
        metavar="PATH",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_parser.add_argument(
        "config_action",
        nargs="?",
        choices=["show", "path"],
        help="show: effective settings as TOML; path: config file in use",
    )

    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr at a level chosen by the global flags."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("followcover").setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        # Dispatch to command handlers
        if args.command == "stats":
            return stats.run(args)
        elif args.command == "degrees":
            return degrees.run(args)
        elif args.command == "top":
            return degrees.run_top(args)
        elif args.command == "cover":
            return cover.run(args)
        elif args.command == "export":
            return export.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
