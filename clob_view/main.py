#!/usr/bin/env python3
"""
CLOB View - price/volume ladder for the terminal.

Usage:
    python -m clob_view.main --book depth.json
    python -m clob_view.main --stacked --once 40x9

    Or, once installed:
    clob-view --book depth.json

Controls:
    v - Toggle left panel orientation
    a - Toggle right panel bar alignment
    r - Reload book
    q - Quit
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from .types import Alignment, Book, Orientation, Viewport


def parse_geometry(value: str) -> Viewport:
    """Parse WIDTHxHEIGHT, e.g. 80x24. Height may be 0 for no depth limit."""
    width_str, sep, height_str = value.lower().partition("x")
    try:
        if not sep:
            raise ValueError(value)
        width, height = int(width_str), int(height_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None
    if width <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {width}")
    return Viewport(width, height)


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CLOB View - two-sided price/volume ladder for the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    clob-view
    clob-view --book depth.json --volume-precision 8
    clob-view --book depth.json --stacked --bar-right --once 40x9
        """
    )

    parser.add_argument(
        "--book",
        type=Path,
        help="JSON depth snapshot to display (default: mock book)"
    )

    parser.add_argument(
        "--levels",
        type=non_negative_int,
        default=20,
        help="Levels per side of the mock book (default: 20)"
    )

    parser.add_argument(
        "--stacked",
        action="store_true",
        help="Stack asks above bids instead of side by side"
    )

    parser.add_argument(
        "--bar-right",
        action="store_true",
        help="Grow stacked volume bars from the right (price on the left)"
    )

    parser.add_argument(
        "--spacing",
        type=non_negative_int,
        default=1,
        help="Columns between bids and asks (default: 1)"
    )

    parser.add_argument(
        "--price-precision",
        type=non_negative_int,
        default=2,
        help="Price decimal places (default: 2)"
    )

    parser.add_argument(
        "--volume-precision",
        type=non_negative_int,
        default=2,
        help="Volume decimal places (default: 2)"
    )

    parser.add_argument(
        "--once",
        type=parse_geometry,
        metavar="WIDTHxHEIGHT",
        help="Print a single frame of the given size and exit"
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Append log records to this file"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)"
    )

    return parser


def book_loader(args: argparse.Namespace) -> Callable[[], Book]:
    """Source for the book: the snapshot file, or a fresh mock book per call."""
    from .datafeed.snapshot import load_book, mock_book

    if args.book:
        path: Path = args.book
        return lambda: load_book(path)
    levels: int = args.levels
    return lambda: mock_book(levels)


def print_once(args: argparse.Namespace, book: Book) -> None:
    """Render one frame to stdout."""
    from rich.console import Console

    from .ui.clob_view import make_model, render_frame

    model = make_model(
        book,
        orientation=Orientation.STACKED if args.stacked else Orientation.SIDE_BY_SIDE,
        alignment=Alignment.BAR_RIGHT if args.bar_right else Alignment.BAR_LEFT,
        spacing=args.spacing,
        price_precision=args.price_precision,
        volume_precision=args.volume_precision,
    )
    frame = render_frame(model, args.once)
    frame.end = "\n"
    Console(highlight=False).print(frame, crop=True)


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    from .log import setup_logger

    setup_logger(args.log_level, args.log_file, console=args.once is not None)

    load = book_loader(args)
    try:
        book = load()
    except (OSError, ValueError) as e:
        print(f"Could not load book: {e}", file=sys.stderr)
        return 1

    if args.once is not None:
        print_once(args, book)
        return 0

    # Import here to avoid slow startup for --help and --once
    from .ui.clob_view import DEMO_STYLES, ClobApp, make_model, run_ui

    print("Starting CLOB View...")
    print(f"  Book: {args.book or 'mock'}")
    print(f"  Levels: {len(book.bids)} bids / {len(book.asks)} asks")

    settings = dict(
        spacing=args.spacing,
        price_precision=args.price_precision,
        volume_precision=args.volume_precision,
        styles=DEMO_STYLES,
    )
    left = make_model(
        book,
        orientation=Orientation.STACKED if args.stacked else Orientation.SIDE_BY_SIDE,
        **settings,
    )
    right = make_model(
        book,
        orientation=Orientation.STACKED,
        alignment=Alignment.BAR_RIGHT if args.bar_right else Alignment.BAR_LEFT,
        **settings,
    )
    run_ui(ClobApp(load, left=left, right=right))
    return 0


def cli() -> None:
    """CLI entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nShutdown requested.")
        sys.exit(0)


if __name__ == "__main__":
    cli()
