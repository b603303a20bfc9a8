"""
Layout composer: arrange composed rows into a panel and place it in the
viewport.

Side by side:

    99.00       1.00 5.00      100.00
    98.00      20.00 10.00     101.00
    97.00      40.00 20.00     102.00

Stacked with BAR_LEFT (asks, spread, bids):

    20.00           102.00
    10.00           101.00
    5.00            100.00
              Spread: 1.00
    1.00             99.00
    20.00            98.00
    40.00            97.00

render() is a pure function of the book, the viewport and the settings.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from ..types import Alignment, Book, Level, Orientation, Row, Span, StyleRole, Viewport, row_width
from .ladder import best_prices, max_volume, visible_levels
from .rows import compose_row, format_fixed, row_side

PLACEHOLDER = "Initializing..."
SPREAD_LABEL = "Spread: "


class RenderSettings(NamedTuple):
    """Formatting switches read by a single render."""
    orientation: Orientation = Orientation.SIDE_BY_SIDE
    alignment: Alignment = Alignment.BAR_LEFT
    spacing: int = 1
    price_precision: int = 2
    volume_precision: int = 2


def placeholder() -> list[Row]:
    return [(Span(PLACEHOLDER, StyleRole.OFF_BAR),)]


def blank(width: int) -> Row:
    if width <= 0:
        return ()
    return (Span(" " * width, StyleRole.OFF_BAR),)


def clip_row(row: Row, width: int) -> Row:
    """Cut a row down to at most `width` characters, keeping span roles."""
    if row_width(row) <= width:
        return row
    clipped: list[Span] = []
    remaining = max(0, width)
    for span in row:
        if remaining <= 0:
            break
        clipped.append(Span(span.text[:remaining], span.role))
        remaining -= len(clipped[-1].text)
    return tuple(clipped)


def place(rows: Sequence[Row], width: int, height: int) -> list[Row]:
    """
    Centre a block of rows in a width x height area.

    Rows are first clipped to `width` and right-padded to the widest row.
    Leftover columns and lines are split evenly, the odd one going to the
    right and bottom. height <= 0 adds no vertical padding; a block taller
    than a positive height is cut to fit.
    """
    clipped = [clip_row(row, width) for row in rows]
    if height > 0:
        clipped = clipped[:height]

    content_width = max((row_width(row) for row in clipped), default=0)
    gap = width - content_width
    left = gap // 2
    right = gap - left

    placed: list[Row] = []
    for row in clipped:
        short = content_width - row_width(row)
        placed.append(blank(left) + row + blank(short + right))

    if height > 0 and len(placed) < height:
        v_gap = height - len(placed)
        top = v_gap // 2
        filler = blank(width)
        placed = [filler] * top + placed + [filler] * (v_gap - top)

    return placed


def compose_side(
    levels: Sequence[Level],
    is_bid: bool,
    width: int,
    volume_max: float,
    settings: RenderSettings,
) -> list[Row]:
    side = row_side(is_bid, settings.orientation, settings.alignment)
    return [
        compose_row(level, width, volume_max, side, settings.price_precision, settings.volume_precision)
        for level in levels
    ]


def spread_row(
    bids: Sequence[Level],
    asks: Sequence[Level],
    width: int,
    settings: RenderSettings,
) -> Row:
    """
    "Spread: x" between the best ask and best bid of the full book.

    Right-aligned under BAR_LEFT, left-aligned under BAR_RIGHT, blank when
    either side is empty.
    """
    best = best_prices(bids, asks)
    if best is None or width <= 0:
        return blank(width)

    best_bid, best_ask = best
    text = (SPREAD_LABEL + format_fixed(best_ask - best_bid, settings.price_precision))[:width]
    if settings.alignment is Alignment.BAR_LEFT:
        text = text.rjust(width)
    else:
        text = text.ljust(width)
    return (Span(text, StyleRole.OFF_BAR),)


def side_by_side(book: Book, viewport: Viewport, settings: RenderSettings) -> list[Row]:
    """Bid column, spacer, ask column; best levels on the top row."""
    spacing = max(0, settings.spacing)
    column_width = max(0, (viewport.width - spacing) // 2)

    bids, asks = visible_levels(book.bids, book.asks, Orientation.SIDE_BY_SIDE, viewport.height)
    volume_max = max_volume(bids, asks)

    bid_rows = compose_side(bids, True, column_width, volume_max, settings)
    ask_rows = compose_side(asks, False, column_width, volume_max, settings)

    empty = blank(column_width)
    spacer = blank(spacing)
    panel: list[Row] = []
    for i in range(max(len(bid_rows), len(ask_rows))):
        bid = bid_rows[i] if i < len(bid_rows) else empty
        ask = ask_rows[i] if i < len(ask_rows) else empty
        panel.append(bid + spacer + ask)

    return place(panel, viewport.width, viewport.height)


def stacked(book: Book, viewport: Viewport, settings: RenderSettings) -> list[Row]:
    """Asks (best at the bottom), spread row, bids (best at the top)."""
    bids, asks = visible_levels(book.bids, book.asks, Orientation.STACKED, viewport.height)
    volume_max = max_volume(bids, asks)

    panel = compose_side(asks, False, viewport.width, volume_max, settings)
    panel.append(spread_row(book.bids, book.asks, viewport.width, settings))
    panel.extend(compose_side(bids, True, viewport.width, volume_max, settings))

    return place(panel, viewport.width, viewport.height)


def render(book: Book, viewport: Viewport, settings: RenderSettings) -> list[Row]:
    """
    Render the book into rows of exactly viewport.width characters.

    A non-positive width renders the placeholder instead of a panel.
    """
    if viewport.width <= 0:
        return placeholder()
    if settings.orientation is Orientation.STACKED:
        return stacked(book, viewport, settings)
    return side_by_side(book, viewport, settings)
