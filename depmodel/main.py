"""Main CLI entry point for depmodel.

Provides commands: inspect
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from depmodel.cli.inspect import inspect_command

logger = logging.getLogger("depmodel.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Depmodel - Build Configuration Model Inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Read a build script or tree document and print its configuration model",
    )
    inspect_parser.add_argument(
        "file",
        help="Build script (*.gradle.kts) or tree document (*.json, *.json5)",
    )
    inspect_parser.add_argument(
        "-f",
        "--format",
        choices=["kts", "json"],
        help="Input format (default: detected from the file suffix)",
    )
    inspect_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional collector configuration. Can be a path to a JSON/JSON5 "
            "file or an inline JSON5 string. When omitted, built-in defaults "
            "are used."
        ),
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the model as JSON instead of tables",
    )
    inspect_parser.add_argument(
        "-o",
        "--output",
        help="Write the JSON export to this file",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "inspect":
        return inspect_command(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
