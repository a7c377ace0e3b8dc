"""
Query engine for encoded value histories.

This package contains the algorithms that interpret the flat change-event
encoding:

- decoder: record layout, effective values and the shared segment cursor
- lookup: value at a point in time, last values, raw price/aux-cost pairs
- extremes: lowest/highest value over a half-open window
- weighted_mean: duration-weighted mean over a trailing window
- availability: unavailable flag and percentage over a window
- analyzer: SeriesAnalyzer facade bound to one channel

All query functions are pure: they never mutate or retain the input sequence
and report "no data" through -1 / None instead of raising.
"""

from pricehistory.engine.analyzer import SeriesAnalyzer
from pricehistory.engine.availability import unavailable_percentage, was_unavailable_in_interval
from pricehistory.engine.decoder import (
    MINUTES_PER_DAY,
    UNBOUNDED,
    effective_value,
    iter_segments,
    reaches_window,
    record_width,
)
from pricehistory.engine.extremes import (
    extremes_in_interval,
    lowest_and_highest,
    lowest_and_highest_with_time,
)
from pricehistory.engine.lookup import (
    closest_value_at_time,
    last_delta,
    last_price_and_aux_cost,
    last_time,
    last_value,
    price_and_aux_cost_at_time,
    value_at_time,
)
from pricehistory.engine.weighted_mean import MIN_HISTORY_DAYS, weighted_mean

__all__ = [
    "SeriesAnalyzer",
    "MINUTES_PER_DAY",
    "MIN_HISTORY_DAYS",
    "UNBOUNDED",
    "effective_value",
    "iter_segments",
    "reaches_window",
    "record_width",
    "last_time",
    "last_value",
    "last_delta",
    "value_at_time",
    "closest_value_at_time",
    "price_and_aux_cost_at_time",
    "last_price_and_aux_cost",
    "extremes_in_interval",
    "lowest_and_highest",
    "lowest_and_highest_with_time",
    "weighted_mean",
    "was_unavailable_in_interval",
    "unavailable_percentage",
]
