"""
Pytest configuration and shared fixtures for the pricehistory test suite.

Histories are built from (time, value) or (time, value, aux_cost) tuples by
the factory below so tests read as a list of change events.
"""

from typing import List, Tuple

import pytest

from pricehistory.engine.decoder import MINUTES_PER_DAY
from pricehistory.models.channel import COUNT, PRICE, PRICE_WITH_SHIPPING

DAY = MINUTES_PER_DAY


# ---------------------------------------------------------------------------
# History factories
# ---------------------------------------------------------------------------

def make_history(*records: Tuple[int, ...]) -> List[int]:
    """Flatten change events into the encoded sequence."""
    flat: List[int] = []
    for record in records:
        flat.extend(record)
    return flat


def days(n: float) -> int:
    """Minutes in ``n`` days."""
    return int(n * DAY)


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def price_channel():
    return PRICE


@pytest.fixture
def shipping_channel():
    return PRICE_WITH_SHIPPING


@pytest.fixture
def count_channel():
    return COUNT


@pytest.fixture
def stock_history():
    """In stock at 50, out of stock from 200, back at 80 from 300."""
    return make_history((100, 50), (200, -1), (300, 80))


@pytest.fixture
def shipping_history():
    """Price 10 + shipping 2 at t=100, price 20 with unknown shipping at t=200."""
    return make_history((100, 10, 2), (200, 20, -1))


@pytest.fixture
def monthly_history():
    """Three price levels, each held ten days, tracked for twenty days."""
    return make_history((0, 100), (days(10), 200), (days(20), 300))
