"""
CLOB View - two-sided price/volume ladder rendered as fixed-size text.

Architecture:
- engine/: pure layout pipeline (sort, truncate, scale, compose rows, place)
- model.py: renderer state (book, configuration, cached viewport)
- datafeed/: book sources (snapshot files, mock books)
- ui/: Textual TUI mapping style roles to Rich styles
"""

from .model import ClobModel
from .types import Alignment, Book, Level, Orientation, Span, StyleRole, Viewport, plain_text

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "Book",
    "ClobModel",
    "Level",
    "Orientation",
    "Span",
    "StyleRole",
    "Viewport",
    "plain_text",
]
