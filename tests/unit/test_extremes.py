"""
Unit tests for the extreme value finder.
"""

import pytest

from pricehistory.engine.decoder import UNBOUNDED
from pricehistory.engine.extremes import (
    extremes_in_interval,
    lowest_and_highest,
    lowest_and_highest_with_time,
)
from pricehistory.models.channel import PRICE, PRICE_WITH_SHIPPING
from pricehistory.models.results import ExtremePoints
from tests.conftest import make_history

NOTHING = (-1, -1, -1, -1)


class TestExtremesInInterval:
    """Test extremes_in_interval window handling."""

    def test_extremes_full_window_excludes_sentinel(self, stock_history):
        assert extremes_in_interval(stock_history, 0, 400, PRICE) == (100, 50, 300, 80)

    def test_extremes_returns_named_tuple(self, stock_history):
        points = extremes_in_interval(stock_history, 0, 400, PRICE)
        assert isinstance(points, ExtremePoints)
        assert points.found
        assert points.min_value == 50
        assert points.max_time == 300

    def test_extremes_record_before_start_keyed_at_start(self, stock_history):
        assert extremes_in_interval(stock_history, 150, 400, PRICE) == (150, 50, 300, 80)

    def test_extremes_superseded_record_before_start_ignored(self):
        seq = make_history((100, 10), (200, 50), (300, 80))
        assert extremes_in_interval(seq, 250, 400, PRICE) == (250, 50, 300, 80)

    def test_extremes_only_unavailable_in_window(self, stock_history):
        assert extremes_in_interval(stock_history, 250, 280, PRICE) == NOTHING

    def test_extremes_end_is_exclusive(self, stock_history):
        assert extremes_in_interval(stock_history, 0, 300, PRICE) == (100, 50, 100, 50)

    def test_extremes_last_record_before_window(self, stock_history):
        assert extremes_in_interval(stock_history, 500, 900, PRICE) == (500, 80, 500, 80)

    def test_extremes_next_change_exactly_at_start_still_counts(self):
        seq = make_history((100, 10), (200, 50))
        assert extremes_in_interval(seq, 200, 400, PRICE) == (200, 10, 200, 50)

    def test_extremes_ties_keep_earliest(self):
        seq = make_history((100, 50), (200, 70), (300, 50), (400, 70))
        assert extremes_in_interval(seq, 0, UNBOUNDED, PRICE) == (100, 50, 200, 70)

    def test_extremes_with_aux_cost(self):
        seq = make_history((100, 10, 5), (200, 12, -1), (300, -1, 4), (400, 9, 0))
        assert extremes_in_interval(seq, 0, UNBOUNDED, PRICE_WITH_SHIPPING) == (
            400,
            9,
            100,
            15,
        )

    def test_extremes_zero_is_a_value(self):
        seq = make_history((100, 0), (200, 5))
        assert extremes_in_interval(seq, 0, 400, PRICE) == (100, 0, 200, 5)

    @pytest.mark.parametrize("start, end", [(400, 400), (500, 100)])
    def test_extremes_empty_window(self, stock_history, start, end):
        assert extremes_in_interval(stock_history, start, end, PRICE) == NOTHING

    def test_extremes_history_starts_after_window(self, stock_history):
        assert extremes_in_interval(stock_history, 0, 50, PRICE) == NOTHING

    def test_extremes_window_ends_at_first_record(self, stock_history):
        assert extremes_in_interval(stock_history, 0, 100, PRICE) == NOTHING

    @pytest.mark.parametrize("seq", [None, [], [100, 50]])
    def test_extremes_insufficient_data(self, seq):
        assert extremes_in_interval(seq, 0, UNBOUNDED, PRICE) == NOTHING

    def test_extremes_does_not_mutate_input(self, stock_history):
        snapshot = list(stock_history)
        extremes_in_interval(stock_history, 0, 400, PRICE)
        assert stock_history == snapshot


class TestLowestAndHighest:
    """Test whole-history convenience wrappers."""

    def test_lowest_and_highest(self, stock_history):
        assert lowest_and_highest(stock_history, PRICE) == (50, 80)

    def test_lowest_and_highest_with_time(self, stock_history):
        assert lowest_and_highest_with_time(stock_history, PRICE) == (100, 50, 300, 80)

    def test_lowest_and_highest_all_unavailable(self):
        seq = make_history((100, -1), (200, -1))
        assert lowest_and_highest(seq, PRICE) == (-1, -1)
