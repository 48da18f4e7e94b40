"""Main CLI entry point for arr_repair."""

import argparse
import logging
import sys

from arr_repair import __version__
from arr_repair.cli.commands import run, scan


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for command-line runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def add_server_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the connection options shared by all subcommands.

    Every option falls back to its ARR_* environment variable.
    """
    parser.add_argument("--url", help="Server URL, e.g. http://localhost:8989 (ARR_URL)")
    parser.add_argument("--api-key", help="Server API key (ARR_API_KEY)")
    parser.add_argument(
        "--type",
        dest="server_type",
        choices=["sonarr", "radarr"],
        help="Server flavor (ARR_TYPE, default: sonarr)",
    )
    parser.add_argument(
        "--download-folder",
        help="Folder the download client saves files to (ARR_DOWNLOAD_FOLDER)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="arr-repair",
        description="Repair downloads stuck in the Sonarr/Radarr queue",
        epilog="Use 'arr-repair <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # arr-repair run
    run_parser = subparsers.add_parser(
        "run",
        help="Repair stuck downloads and clear them from the queue",
        description="Match stuck downloads with history, move the files, rescan and clean the queue",
    )
    add_server_arguments(run_parser)
    run_parser.add_argument(
        "--rename",
        action="store_true",
        help="Ask the server to rename the repaired series/movies afterwards",
    )
    run_parser.add_argument("--retries", type=int, help="Command attempts (ARR_RETRIES, default: 3)")
    run_parser.add_argument(
        "--timeout",
        type=float,
        help="Give up waiting for server commands after this many seconds",
    )

    # arr-repair scan
    scan_parser = subparsers.add_parser(
        "scan",
        help="Show stuck downloads and planned moves without changing anything",
        description="Dry run: match stuck downloads and report where their files would go",
    )
    add_server_arguments(scan_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    # Dispatch to appropriate command
    if args.command == "run":
        return run.run_command(args)
    elif args.command == "scan":
        return scan.scan_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
