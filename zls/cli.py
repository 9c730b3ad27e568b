"""Command-line front door for zls.

Parses CLI options into an immutable ``ListingConfig``, validates the target
directory, then lists and renders it. Errors become ``Error: ...`` messages on
stderr with exit status 1; nothing is printed to stdout on failure.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .config import (
    DisplayMode,
    ListingConfig,
    load_color_preference,
    load_config,
    load_display_mode,
    load_human_sizes,
    load_show_hidden,
    load_theme_name,
)
from .errors import ListingError
from .listing import list_directory, validate_directory
from .render import render
from .terminal import supports_color
from .ui_theme import available_theme_names

DESCRIPTION = "A fast ls replacement written in Python"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zls", description=DESCRIPTION)
    parser.add_argument("path", nargs="?", default=".", help="Directory to list (default: current directory).")
    parser.add_argument("-a", "--all", action="store_true", default=None, help="Show hidden files.")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-s",
        "--short",
        dest="display_mode",
        action="store_const",
        const=DisplayMode.COMPACT,
        help="Use compact multi-column format.",
    )
    mode.add_argument(
        "-l",
        "--long",
        dest="display_mode",
        action="store_const",
        const=DisplayMode.DETAIL,
        help="Use long listing format (default).",
    )

    parser.add_argument("-t", "--time", action="store_true", help="Sort by modification time, newest first.")
    parser.add_argument(
        "-H",
        "--human",
        action="store_true",
        default=None,
        help="Show human readable sizes (default).",
    )
    parser.add_argument("--bytes", action="store_true", help="Show raw byte counts, overriding --human.")

    color = parser.add_mutually_exclusive_group()
    color.add_argument("--color", dest="color", action="store_const", const=True, help="Force colored names.")
    color.add_argument("--no-color", dest="color", action="store_const", const=False, help="Disable color output.")

    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Column width for compact output (default: terminal width).",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Number of parallel metadata workers (default: CPU count).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ListingConfig:
    """Merge parsed flags over user preference defaults."""
    preferences = load_config()
    color = args.color
    if color is None:
        color = load_color_preference(preferences)
    if color is None:
        color = supports_color()

    return ListingConfig(
        path=Path(args.path),
        show_hidden=args.all if args.all is not None else load_show_hidden(preferences),
        sort_by_time=args.time,
        display_mode=args.display_mode if args.display_mode is not None else load_display_mode(preferences),
        human=args.human if args.human is not None else load_human_sizes(preferences),
        raw_bytes=args.bytes,
        color=color,
        theme=args.theme if args.theme is not None else load_theme_name(preferences),
        width=args.width,
        workers=args.workers,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments, list the target directory and print it.

    ``argv`` defaults to ``sys.argv[1:]``. Exits with status 1 and an
    ``Error:`` message on stderr when the target is missing, is not a
    directory, or any entry's metadata cannot be read.
    """
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    try:
        validate_directory(config.path)
        entries = list_directory(config.path, config)
    except ListingError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    render(entries, config)


if __name__ == "__main__":
    main()
