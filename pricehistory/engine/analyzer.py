"""
SeriesAnalyzer: all history queries bound to one channel layout.

The analyzer holds only the channel descriptor. Every method takes the
sequence per call and delegates to the pure query functions, so a single
instance can be shared freely between threads.
"""

import math
from typing import Optional, Tuple

import structlog

from pricehistory.engine import availability, extremes, lookup
from pricehistory.engine.decoder import MINUTES_PER_DAY, History, record_count
from pricehistory.engine.weighted_mean import weighted_mean
from pricehistory.models.channel import ChannelDescriptor
from pricehistory.models.results import ExtremePoints, PriceAndAuxCost, SeriesSummary


class SeriesAnalyzer:
    """
    Query facade for histories of a single channel type.

    Attributes:
        channel: Layout and meaning of the sequences this analyzer reads

    Example:
        >>> analyzer = SeriesAnalyzer(PRICE)
        >>> analyzer.value_at_time([100, 50, 200, -1, 300, 80], 250)
        -1
        >>> analyzer.closest_value_at_time([100, 50, 200, -1, 300, 80], 250)
        80
    """

    def __init__(self, channel: ChannelDescriptor):
        self.channel = channel
        self.logger = structlog.get_logger(__name__).bind(channel=channel.name)

    # --- Point lookup ---
    def last_time(self, seq: History) -> int:
        return lookup.last_time(seq, self.channel)

    def last_value(self, seq: History) -> int:
        return lookup.last_value(seq, self.channel)

    def last_delta(self, seq: History) -> int:
        return lookup.last_delta(seq, self.channel)

    def value_at_time(self, seq: History, time: int) -> int:
        return lookup.value_at_time(seq, time, self.channel)

    def closest_value_at_time(self, seq: History, time: int) -> int:
        return lookup.closest_value_at_time(seq, time, self.channel)

    def price_and_aux_cost_at_time(self, seq: History, time: int) -> PriceAndAuxCost:
        """Raw (price, aux_cost) pair; only defined for 3-wide channels."""
        if not self.channel.has_auxiliary_cost:
            return PriceAndAuxCost()
        return lookup.price_and_aux_cost_at_time(seq, time)

    def last_price_and_aux_cost(self, seq: History) -> PriceAndAuxCost:
        if not self.channel.has_auxiliary_cost:
            return PriceAndAuxCost()
        return lookup.last_price_and_aux_cost(seq)

    # --- Extremes ---
    def extremes_in_interval(self, seq: History, start: int, end: int) -> ExtremePoints:
        return extremes.extremes_in_interval(seq, start, end, self.channel)

    def lowest_and_highest(self, seq: History) -> Tuple[int, int]:
        return extremes.lowest_and_highest(seq, self.channel)

    def lowest_and_highest_with_time(self, seq: History) -> ExtremePoints:
        return extremes.lowest_and_highest_with_time(seq, self.channel)

    # --- Weighted mean ---
    def weighted_mean(self, seq: History, now: int, days: float) -> int:
        return weighted_mean(seq, now, days, self.channel)

    # --- Availability ---
    def was_unavailable_in_interval(self, seq: History, start: int, end: int) -> Optional[bool]:
        return availability.was_unavailable_in_interval(seq, start, end, self.channel)

    def unavailable_percentage(
        self,
        seq: History,
        now: int,
        start: int,
        end: int,
        tracking_since: int,
    ) -> int:
        return availability.unavailable_percentage(
            seq, now, start, end, self.channel, tracking_since
        )

    def summarize(
        self,
        seq: History,
        now: int,
        days: float = 90,
        tracking_since: int = 0,
    ) -> SeriesSummary:
        """
        Compute the commonly requested figures of one history in a single call.

        Args:
            seq: Encoded history
            now: Current time in minutes
            days: Trailing window in days for the weighted mean and availability;
                may be fractional, math.inf covers the whole history
            tracking_since: Time tracking began, bounds the availability window

        Returns:
            SeriesSummary; unavailable_percentage is None for non-price channels

        Raises:
            ValueError: If days is NaN or negative
        """
        if math.isnan(days) or days < 0:
            raise ValueError(f"days must be a non-negative number, got {days}")

        lowest, highest = self.lowest_and_highest(seq)
        percentage = None
        if self.channel.is_primary_metric:
            percentage = self.unavailable_percentage(
                seq, now, self._window_start(now, days), now, tracking_since
            )

        summary = SeriesSummary(
            channel=self.channel.name,
            record_count=record_count(seq, self.channel),
            last_time=self.last_time(seq),
            last_value=self.last_value(seq),
            last_delta=self.last_delta(seq),
            lowest=lowest,
            highest=highest,
            weighted_mean=self.weighted_mean(seq, now, days),
            window_days=days,
            unavailable_percentage=percentage,
        )
        self.logger.debug(
            "series_summarized",
            record_count=summary.record_count,
            window_days=days,
        )
        return summary

    @staticmethod
    def _window_start(now: int, days: float) -> int:
        """Start of the trailing window, never before time 0."""
        start = now - days * MINUTES_PER_DAY
        return int(start) if start > 0 else 0
