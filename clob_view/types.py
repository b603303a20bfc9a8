"""
Data types for the CLOB view.

Notes:
- NamedTuple for immutable value types (levels, viewports, spans)
- Enums for the two-valued layout switches so every combination is explicit
- Styling is a tag (StyleRole); mapping a tag to colors is the UI's job
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, NamedTuple, Sequence


class Orientation(Enum):
    """How the two sides of the book are arranged."""
    SIDE_BY_SIDE = "side_by_side"  # bids left, asks right, best levels on top
    STACKED = "stacked"            # asks above a spread row above bids


class Alignment(Enum):
    """Where the volume bar grows from in a stacked row."""
    BAR_LEFT = "bar_left"    # volume on the left, price on the right
    BAR_RIGHT = "bar_right"  # price on the left, volume on the right


class StyleRole(Enum):
    """Abstract paint applied to a span of text."""
    OFF_BAR = "off_bar"
    ON_BID = "on_bid"
    ON_ASK = "on_ask"


class Level(NamedTuple):
    """Single price level. Volume is expected to be non-negative."""
    price: float
    volume: float


class Book(NamedTuple):
    """
    Both sides of the order book, in any order.

    The engine sorts private copies, so the caller may keep using the
    sequences it passed in.
    """
    bids: Sequence[Level] = ()
    asks: Sequence[Level] = ()

    @classmethod
    def from_pairs(
        cls,
        bids: Sequence[tuple[float, float]] = (),
        asks: Sequence[tuple[float, float]] = (),
    ) -> Book:
        """Build a book from (price, volume) pairs."""
        return cls(
            bids=tuple(Level(float(p), float(v)) for p, v in bids),
            asks=tuple(Level(float(p), float(v)) for p, v in asks),
        )

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> Book:
        """
        Load a book from a depth snapshot.

        Expected format: {bids: [[price, qty], ...], asks: [[price, qty], ...]}
        Prices and quantities may be strings or numbers; extra fields per
        entry are ignored.

        Raises ValueError for missing sides, malformed entries, non-finite
        numbers or negative quantities.
        """
        try:
            raw_bids = data['bids']
            raw_asks = data['asks']
        except (KeyError, TypeError) as e:
            raise ValueError(f"snapshot must contain 'bids' and 'asks': {e}") from e

        return cls(bids=_parse_levels(raw_bids, 'bids'), asks=_parse_levels(raw_asks, 'asks'))


def _parse_levels(entries: Any, side: str) -> tuple[Level, ...]:
    levels: list[Level] = []
    for i, entry in enumerate(entries):
        try:
            price, qty = float(entry[0]), float(entry[1])
        except (IndexError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"{side}[{i}]: expected [price, qty], got {entry!r}") from e
        if not (math.isfinite(price) and math.isfinite(qty)):
            raise ValueError(f"{side}[{i}]: non-finite value {entry!r}")
        if qty < 0:
            raise ValueError(f"{side}[{i}]: negative quantity {qty}")
        levels.append(Level(price, qty))
    return tuple(levels)


class Viewport(NamedTuple):
    """Target size in character cells. height <= 0 means no depth limit."""
    width: int
    height: int


class Span(NamedTuple):
    """A run of text painted with one style role."""
    text: str
    role: StyleRole


# One rendered line, left to right.
Row = tuple[Span, ...]


def row_width(row: Row) -> int:
    return sum(len(span.text) for span in row)


def plain_text(rows: Sequence[Row]) -> str:
    """Join rendered rows into unstyled text, one line per row."""
    return "\n".join("".join(span.text for span in row) for row in rows)
