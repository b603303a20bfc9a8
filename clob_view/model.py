"""
CLOB view state: configuration, current book and cached viewport.

The model is configured by plain attribute assignment and rendered with
view() or view_with_options(). Rendering reads the state and never mutates
it, so two renders of the same state produce identical rows.

Thread-safety: NOT thread-safe. Designed to be owned by one event loop that
alternates between updates (resize, new book) and renders.

Caller obligation: prices and volumes must be finite and volumes
non-negative. Book.from_snapshot() enforces this for loaded data; the
render path does not check it.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .engine.layout import RenderSettings, placeholder, render
from .types import Alignment, Book, Level, Orientation, Row, StyleRole, Viewport

logger = logging.getLogger(__name__)

# Rich style definitions; the engine only passes these through.
DEFAULT_STYLES: dict[StyleRole, Any] = {
    StyleRole.OFF_BAR: "color(188)",
    StyleRole.ON_BID: "color(188) on color(34)",
    StyleRole.ON_ASK: "color(188) on color(124)",
}


class ClobModel:
    """
    Two-sided price/volume ladder renderer.

    Usage:
        model = ClobModel()
        model.set_book(bids=[(99, 1), (98, 20)], asks=[(100, 5)])
        model.orientation = Orientation.STACKED
        rows = model.view_with_options(Viewport(40, 7))
    """

    __slots__ = (
        'book', 'orientation', 'alignment', 'spacing',
        'price_precision', 'volume_precision', 'styles',
        '_width', '_height',
    )

    def __init__(self) -> None:
        self.book: Book = Book()

        self.orientation: Orientation = Orientation.SIDE_BY_SIDE
        # Only used by the stacked orientation
        self.alignment: Alignment = Alignment.BAR_LEFT

        # Blank columns between bids and asks when side by side
        self.spacing: int = 1

        self.price_precision: int = 2
        self.volume_precision: int = 2

        # Opaque presentation handles per style role
        self.styles: dict[StyleRole, Any] = dict(DEFAULT_STYLES)

        # Last size reported by resize(); used by view()
        self._width: int = 0
        self._height: int = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        """Record the viewport size used by view(). No other effect."""
        logger.debug("resize %dx%d -> %dx%d", self._width, self._height, width, height)
        self._width = width
        self._height = height

    def set_book(
        self,
        bids: Sequence[Level | tuple[float, float]] = (),
        asks: Sequence[Level | tuple[float, float]] = (),
    ) -> None:
        """Replace the whole book. Accepts Level values or (price, volume) pairs."""
        self.book = Book.from_pairs(bids, asks)
        logger.debug("book replaced: %d bids, %d asks", len(self.book.bids), len(self.book.asks))

    def settings(self) -> RenderSettings:
        return RenderSettings(
            orientation=self.orientation,
            alignment=self.alignment,
            spacing=self.spacing,
            price_precision=self.price_precision,
            volume_precision=self.volume_precision,
        )

    def style_for(self, role: StyleRole) -> Any:
        return self.styles.get(role, DEFAULT_STYLES[role])

    def view(self) -> list[Row]:
        """Render using the size from the last resize() call."""
        if self._width <= 0:
            return placeholder()
        return self.view_with_options(Viewport(self._width, self._height))

    def view_with_options(self, viewport: Viewport) -> list[Row]:
        """Render into the given viewport."""
        return render(self.book, viewport, self.settings())
