"""Shared fixtures: the sample book used throughout the tests."""
import pytest

from clob_view.log import setup_logger
from clob_view.model import ClobModel
from clob_view.types import Book, Level


SAMPLE_BIDS = [Level(99.0, 1.0), Level(98.0, 20.0), Level(97.0, 40.0)]
SAMPLE_ASKS = [Level(100.0, 5.0), Level(101.0, 10.0), Level(102.0, 20.0)]


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    setup_logger("WARNING")


@pytest.fixture
def sample_book() -> Book:
    return Book(bids=list(SAMPLE_BIDS), asks=list(SAMPLE_ASKS))


@pytest.fixture
def shuffled_book() -> Book:
    return Book(
        bids=[SAMPLE_BIDS[2], SAMPLE_BIDS[0], SAMPLE_BIDS[1]],
        asks=[SAMPLE_ASKS[1], SAMPLE_ASKS[2], SAMPLE_ASKS[0]],
    )


@pytest.fixture
def model(sample_book) -> ClobModel:
    m = ClobModel()
    m.book = sample_book
    return m
