"""
Ladder preparation: sort, truncate, scale.

Pipeline per render:
1. sort_levels()    - display order for the active orientation
2. row_budget()     - how many rows each side may use
3. truncate()       - visible slice of each side
4. max_volume()     - bar scaling denominator over the visible levels

All functions return new lists; the caller's sequences are never reordered.
Sorting is stable, so levels with equal prices keep their input order.
"""

from __future__ import annotations

from typing import Sequence

from ..types import Level, Orientation


def _by_price(level: Level) -> float:
    return level.price


def sort_levels(
    bids: Sequence[Level],
    asks: Sequence[Level],
    orientation: Orientation,
) -> tuple[list[Level], list[Level]]:
    """
    Return sorted copies of both sides.

    Bids are always descending (best bid first). Asks are ascending (best
    ask first) side by side, descending when stacked so that the best ask
    ends up at the bottom of the ask block, next to the spread row.
    """
    sorted_bids = sorted(bids, key=_by_price, reverse=True)
    sorted_asks = sorted(asks, key=_by_price, reverse=orientation is Orientation.STACKED)
    return sorted_bids, sorted_asks


def row_budget(height: int, orientation: Orientation) -> int | None:
    """
    Rows available to each side for a viewport height.

    Returns None when height <= 0 (no depth limit). Stacked layouts reserve
    one row for the spread line and split the rest evenly; this can be 0 for
    very short viewports, in which case no levels are shown.
    """
    if height <= 0:
        return None
    if orientation is Orientation.STACKED:
        return (height - 1) // 2
    return height


def truncate(
    bids: list[Level],
    asks: list[Level],
    rows: int,
    orientation: Orientation,
) -> tuple[list[Level], list[Level]]:
    """
    Visible part of each sorted side.

    rows <= 0 disables truncation. Side by side shows the first `rows` of
    each side. Stacked shows the first `rows` bids and the last `rows` asks
    of the descending ask list (the lowest, best asks).
    """
    if rows <= 0:
        return bids, asks
    if orientation is Orientation.STACKED:
        return bids[:rows], asks[-rows:]
    return bids[:rows], asks[:rows]


def visible_levels(
    bids: Sequence[Level],
    asks: Sequence[Level],
    orientation: Orientation,
    height: int,
) -> tuple[list[Level], list[Level]]:
    """Sort then truncate both sides for a viewport height."""
    sorted_bids, sorted_asks = sort_levels(bids, asks, orientation)
    budget = row_budget(height, orientation)
    if budget is None:
        return sorted_bids, sorted_asks
    if budget == 0:
        return [], []
    return truncate(sorted_bids, sorted_asks, budget, orientation)


def max_volume(bids: Sequence[Level], asks: Sequence[Level]) -> float:
    """Largest volume across both visible sides, 0.0 when both are empty."""
    return max((level.volume for side in (bids, asks) for level in side), default=0.0)


def best_prices(
    bids: Sequence[Level],
    asks: Sequence[Level],
) -> tuple[float, float] | None:
    """
    (best_bid, best_ask) over the full, untruncated book.

    Returns None if either side is empty.
    """
    if not bids or not asks:
        return None
    return max(level.price for level in bids), min(level.price for level in asks)
