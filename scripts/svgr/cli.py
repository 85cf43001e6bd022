"""Command-line interface for SVG grid combining."""

import argparse
import logging
import sys
from pathlib import Path

from .config import SortMode, build_combine_config, load_combine_defaults
from .combiner import run_combine
from .errors import SvgrError


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that shows full help and exits 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_help(sys.stderr)
        self.exit(1, f"\n{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = UsageParser(
        prog="svgr",
        description="Combine single-illustration SVG files into one grid SVG",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- combine subcommand ---
    combine_parser = subparsers.add_parser(
        "combine",
        help="Lay out a directory of SVG files as a grid",
        usage="svgr combine [options] <source_directory> <rows> <columns>",
    )
    combine_parser.add_argument(
        "source_directory",
        type=Path,
        help="Directory containing the SVG files to combine",
    )
    combine_parser.add_argument("rows", type=int, help="Number of grid rows")
    combine_parser.add_argument("columns", type=int, help="Number of grid columns")
    combine_parser.add_argument(
        "-s", "--scaling-factor",
        type=float,
        metavar="FACTOR",
        help="Scaling factor for the SVG elements (default: 1)",
    )
    combine_parser.add_argument(
        "-t", "--margin-top",
        type=int,
        metavar="MARGIN",
        help="Top margin between the SVG elements (default: 0)",
    )
    combine_parser.add_argument(
        "-l", "--margin-left",
        type=int,
        metavar="MARGIN",
        help="Left margin between the SVG elements (default: 0)",
    )
    combine_parser.add_argument(
        "--sort",
        choices=[mode.value for mode in SortMode],
        help="Sorting option for the SVG files (default: default)",
    )
    combine_parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for --sort random",
    )
    combine_parser.add_argument(
        "-j", "--jobs",
        type=int,
        help="Number of files to parse in parallel (default: 1)",
    )
    combine_parser.add_argument(
        "--out",
        type=Path,
        metavar="FILE",
        help="Output file path (default: standard output)",
    )
    combine_parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML file with default values for the options above",
    )
    combine_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def cmd_combine(args: argparse.Namespace) -> int:
    """Execute combine subcommand."""
    # Config file supplies defaults, explicit flags win
    options = load_combine_defaults(args.config) if args.config else {}
    for key in ("scaling_factor", "margin_top", "margin_left", "sort", "seed", "jobs"):
        value = getattr(args, key)
        if value is not None:
            options[key] = value

    config = build_combine_config(
        args.source_directory, args.rows, args.columns, options, out=args.out
    )
    run_combine(config)
    return 0


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout carries only the SVG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    try:
        if args.command == "combine":
            sys.exit(cmd_combine(args))
        parser.print_help()
        sys.exit(1)
    except (SvgrError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
