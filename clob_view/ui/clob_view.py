"""
CLOB ladder TUI using Textual.

Displays:
- Left: book side by side (bids | asks), `v` toggles to stacked
- Right: book stacked with the spread row, `a` toggles bar alignment

The engine tags spans with abstract style roles; this module is the only
place that turns those roles into Rich styles.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from rich.style import Style
from rich.text import Text

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Footer, Static

from ..model import ClobModel
from ..types import Alignment, Book, Orientation, Row, StyleRole, Viewport

logger = logging.getLogger(__name__)

# Demo colour scheme (256-colour palette)
DEMO_STYLES = {
    StyleRole.OFF_BAR: "color(188)",
    StyleRole.ON_BID: "color(228) on color(28)",
    StyleRole.ON_ASK: "color(228) on color(197)",
}


def resolve_style(handle: Any) -> Style:
    """Turn a style handle (Rich Style, style definition string or None) into a Style."""
    if handle is None:
        return Style.null()
    if isinstance(handle, Style):
        return handle
    return Style.parse(str(handle))


def to_rich_text(rows: Sequence[Row], model: ClobModel) -> Text:
    """Paint rendered rows with the model's style handles."""
    styles = {role: resolve_style(model.style_for(role)) for role in StyleRole}
    text = Text(no_wrap=True, overflow="crop", end="")
    for i, row in enumerate(rows):
        if i:
            text.append("\n")
        for span in row:
            if span.text:
                text.append(span.text, style=styles[span.role])
    return text


def render_frame(model: ClobModel, viewport: Viewport) -> Text:
    """One styled frame of the model at a fixed size."""
    return to_rich_text(model.view_with_options(viewport), model)


class ClobPanel(Static):
    """Order book ladder that fills its content area."""

    DEFAULT_CSS = """
    ClobPanel {
        width: 1fr;
        height: 100%;
        border: round #ffffaf;
        padding: 1 2;
    }
    """

    def __init__(self, model: ClobModel, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.model = model

    def on_resize(self, event: events.Resize) -> None:
        size = self.content_size
        self.model.resize(size.width, size.height)
        self.refresh()

    def update_book(self, book: Book) -> None:
        """Replace the book and redraw."""
        self.model.book = book
        self.refresh()

    def toggle_orientation(self) -> None:
        if self.model.orientation is Orientation.STACKED:
            self.model.orientation = Orientation.SIDE_BY_SIDE
        else:
            self.model.orientation = Orientation.STACKED
        self.refresh()

    def toggle_alignment(self) -> None:
        if self.model.alignment is Alignment.BAR_LEFT:
            self.model.alignment = Alignment.BAR_RIGHT
        else:
            self.model.alignment = Alignment.BAR_LEFT
        self.refresh()

    def render(self) -> Text:
        return to_rich_text(self.model.view(), self.model)


def make_model(
    book: Book,
    orientation: Orientation = Orientation.SIDE_BY_SIDE,
    alignment: Alignment = Alignment.BAR_LEFT,
    spacing: int = 1,
    price_precision: int = 2,
    volume_precision: int = 2,
    styles: dict[StyleRole, Any] | None = None,
) -> ClobModel:
    """Configured model for one panel."""
    model = ClobModel()
    model.book = book
    model.orientation = orientation
    model.alignment = alignment
    model.spacing = spacing
    model.price_precision = price_precision
    model.volume_precision = volume_precision
    if styles:
        model.styles.update(styles)
    return model


class ClobApp(App):
    """Two-panel CLOB viewer."""

    CSS = """
    Screen {
        background: #0f172a;
    }

    #panels {
        width: 100%;
        height: 1fr;
    }
    """

    BINDINGS = [
        ("v", "toggle_orientation", "Orientation"),
        ("a", "toggle_alignment", "Alignment"),
        ("r", "reload", "Reload"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        load_book: Callable[[], Book],
        left: ClobModel | None = None,
        right: ClobModel | None = None,
    ) -> None:
        super().__init__()
        self.load_book = load_book
        if left is None or right is None:
            book = load_book()
            left = left or make_model(book, styles=DEMO_STYLES)
            right = right or make_model(book, orientation=Orientation.STACKED, styles=DEMO_STYLES)
        self.left_model = left
        self.right_model = right
        self._left: ClobPanel | None = None
        self._right: ClobPanel | None = None

    def compose(self) -> ComposeResult:
        self._left = ClobPanel(self.left_model, id="left")
        self._right = ClobPanel(self.right_model, id="right")
        yield Horizontal(self._left, self._right, id="panels")
        yield Footer()

    def action_toggle_orientation(self) -> None:
        """Switch the left panel between side by side and stacked (bound to 'v')."""
        if self._left:
            self._left.toggle_orientation()

    def action_toggle_alignment(self) -> None:
        """Flip the bar alignment of the right panel (bound to 'a')."""
        if self._right:
            self._right.toggle_alignment()

    def action_reload(self) -> None:
        """Reload the book into both panels (bound to 'r')."""
        try:
            book = self.load_book()
        except (OSError, ValueError) as e:
            logger.warning("reload failed: %s", e)
            self.notify(f"Reload failed: {e}", severity="error")
            return
        for panel in (self._left, self._right):
            if panel:
                panel.update_book(book)


def run_ui(app: ClobApp) -> None:
    """Run the TUI application (blocking)."""
    app.run()
