"""
Row composer: one price level -> one fixed-width row of styled spans.

A row is the price and volume fields separated by padding, split into a
bar segment ("on") and a background segment ("off"). The alignment of the
row decides both the field order and the edge the bar grows from:

    BAR_LEFT   volume ...... price   bar covers the leading characters
    BAR_RIGHT  price ...... volume   bar covers the trailing characters

Side by side, bids use BAR_RIGHT and asks use BAR_LEFT so both bars grow
outwards from the centre gap. Stacked rows use the configured alignment.
"""

from __future__ import annotations

from typing import NamedTuple

from ..types import Alignment, Level, Orientation, Row, Span, StyleRole


class RowSide(NamedTuple):
    """Which side a row belongs to and how its bar is aligned."""
    is_bid: bool
    alignment: Alignment

    @property
    def on_role(self) -> StyleRole:
        return StyleRole.ON_BID if self.is_bid else StyleRole.ON_ASK


def row_side(is_bid: bool, orientation: Orientation, alignment: Alignment) -> RowSide:
    """Row descriptor for a side under the active orientation."""
    if orientation is Orientation.SIDE_BY_SIDE:
        return RowSide(is_bid, Alignment.BAR_RIGHT if is_bid else Alignment.BAR_LEFT)
    return RowSide(is_bid, alignment)


def format_fixed(value: float, precision: int) -> str:
    """Fixed-point decimal with exactly `precision` fractional digits."""
    return f"{value:.{max(0, precision)}f}"


def bar_length(volume: float, max_volume: float, width: int) -> int:
    """Bar cells for a volume, floored and clamped to [0, width]."""
    if width <= 0 or max_volume <= 0:
        return 0
    on_len = int(width * (volume / max_volume))
    return min(max(on_len, 0), width)


def compose_text(
    level: Level,
    width: int,
    alignment: Alignment,
    price_precision: int,
    volume_precision: int,
) -> str:
    """
    Row text of exactly `width` characters.

    Padding never goes negative; if the two fields do not fit they are
    joined without padding and the tail is clipped.
    """
    price = format_fixed(level.price, price_precision)
    volume = format_fixed(level.volume, volume_precision)
    padding = " " * max(0, width - len(price) - len(volume))

    if alignment is Alignment.BAR_LEFT:
        text = volume + padding + price
    else:
        text = price + padding + volume
    return text[:width]


def compose_row(
    level: Level,
    width: int,
    max_volume: float,
    side: RowSide,
    price_precision: int,
    volume_precision: int,
) -> Row:
    """
    Compose one level into an (on, off) or (off, on) pair of spans.

    Both spans are always present (possibly empty) and their lengths add up
    to `width`. A non-positive width yields an empty row.
    """
    if width <= 0:
        return ()

    text = compose_text(level, width, side.alignment, price_precision, volume_precision)
    on_len = bar_length(level.volume, max_volume, width)

    if side.alignment is Alignment.BAR_LEFT:
        return (
            Span(text[:on_len], side.on_role),
            Span(text[on_len:], StyleRole.OFF_BAR),
        )

    off_len = width - on_len
    return (
        Span(text[:off_len], StyleRole.OFF_BAR),
        Span(text[off_len:], side.on_role),
    )
