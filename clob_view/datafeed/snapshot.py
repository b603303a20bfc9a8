"""
Book sources for the viewer: depth snapshot files and mock books.

Snapshot files use the common exchange depth format:
    {"bids": [["99.00", "1.5"], ...], "asks": [["100.00", "2.0"], ...]}

Values may be strings or numbers. Validation happens in Book.from_snapshot().
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

import orjson

from ..types import Book

logger = logging.getLogger(__name__)


def load_book(path: Path) -> Book:
    """
    Load a book from a JSON depth snapshot file.

    Raises OSError if the file cannot be read, orjson.JSONDecodeError for
    invalid JSON and ValueError for a malformed snapshot.
    """
    data = orjson.loads(path.read_bytes())
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    book = Book.from_snapshot(data)
    logger.info("loaded %s: %d bids, %d asks", path, len(book.bids), len(book.asks))
    return book


def generate_mock_snapshot(
    base_price: float = 100.0,
    levels: int = 20,
    tick_size: float = 0.5,
    max_qty: float = 50.0,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """Generate a mock depth snapshot around base_price."""
    rng = rng or random.Random()

    bids = []
    asks = []

    for i in range(levels):
        bid_price = base_price - (i + 1) * tick_size
        ask_price = base_price + i * tick_size

        bids.append([f"{bid_price:.8f}", f"{rng.uniform(0, max_qty):.8f}"])
        asks.append([f"{ask_price:.8f}", f"{rng.uniform(0, max_qty):.8f}"])

    # Sides arrive unordered
    rng.shuffle(bids)
    rng.shuffle(asks)

    return {'bids': bids, 'asks': asks}


def mock_book(levels: int = 20, rng: random.Random | None = None) -> Book:
    return Book.from_snapshot(generate_mock_snapshot(levels=levels, rng=rng))
