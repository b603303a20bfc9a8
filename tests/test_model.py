"""Tests for model.py"""
import logging

from clob_view.engine.layout import PLACEHOLDER
from clob_view.model import DEFAULT_STYLES, ClobModel
from clob_view.types import (
    Alignment,
    Book,
    Level,
    Orientation,
    StyleRole,
    Viewport,
    plain_text,
)


def test_defaults():
    model = ClobModel()
    assert model.book == Book()
    assert model.orientation is Orientation.SIDE_BY_SIDE
    assert model.alignment is Alignment.BAR_LEFT
    assert model.spacing == 1
    assert model.price_precision == 2
    assert model.volume_precision == 2
    assert model.styles == DEFAULT_STYLES
    assert (model.width, model.height) == (0, 0)


def test_view_before_resize_is_placeholder(model):
    assert plain_text(model.view()) == PLACEHOLDER


def test_resize_feeds_view(model):
    model.resize(40, 3)
    assert (model.width, model.height) == (40, 3)
    assert model.view() == model.view_with_options(Viewport(40, 3))


def test_explicit_viewport_ignores_cached_size(model):
    model.resize(10, 2)
    rows = model.view_with_options(Viewport(40, 7))
    assert len(rows) == 7
    assert all(len(line) == 40 for line in plain_text(rows).split("\n"))


def test_field_assignment_changes_layout(model):
    model.orientation = Orientation.STACKED
    text = plain_text(model.view_with_options(Viewport(40, 7))).split("\n")
    assert text[3] == "Spread: 1.00".rjust(40)

    model.alignment = Alignment.BAR_RIGHT
    text = plain_text(model.view_with_options(Viewport(40, 7))).split("\n")
    assert text[3] == "Spread: 1.00".ljust(40)


def test_precision_settings(model):
    model.price_precision = 0
    model.volume_precision = 3
    text = plain_text(model.view_with_options(Viewport(41, 1)))
    assert text.startswith("99")
    assert "1.000" in text
    assert "99.0" not in text


def test_negative_precision_is_clamped(model):
    model.price_precision = -2
    model.volume_precision = -1
    text = plain_text(model.view_with_options(Viewport(41, 1)))
    assert text.split()[:2] == ["99", "1"]


def test_set_book_accepts_pairs_and_levels():
    model = ClobModel()
    model.set_book(bids=[(99, 1), Level(98.0, 2.0)], asks=[(100.0, 3)])
    assert model.book.bids == (Level(99.0, 1.0), Level(98.0, 2.0))
    assert model.book.asks == (Level(100.0, 3.0),)


def test_render_does_not_reorder_caller_data():
    bids = [Level(97.0, 40.0), Level(99.0, 1.0), Level(98.0, 20.0)]
    asks = [Level(101.0, 10.0), Level(102.0, 20.0), Level(100.0, 5.0)]
    model = ClobModel()
    model.book = Book(bids=bids, asks=asks)
    for orientation in Orientation:
        model.orientation = orientation
        model.view_with_options(Viewport(40, 7))
    assert bids == [Level(97.0, 40.0), Level(99.0, 1.0), Level(98.0, 20.0)]
    assert asks == [Level(101.0, 10.0), Level(102.0, 20.0), Level(100.0, 5.0)]


def test_repeated_renders_are_identical(model):
    model.orientation = Orientation.STACKED
    model.resize(33, 9)
    assert model.view() == model.view()


def test_style_for_falls_back_to_default(model):
    model.styles = {StyleRole.ON_BID: "bold"}
    assert model.style_for(StyleRole.ON_BID) == "bold"
    assert model.style_for(StyleRole.ON_ASK) == DEFAULT_STYLES[StyleRole.ON_ASK]


def test_resize_and_book_changes_are_logged(caplog):
    model = ClobModel()
    with caplog.at_level(logging.DEBUG, logger="clob_view"):
        model.resize(80, 24)
        model.set_book(bids=[(1, 1)])
    assert "resize 0x0 -> 80x24" in caplog.text
    assert "1 bids, 0 asks" in caplog.text
