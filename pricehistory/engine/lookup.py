"""
Point Lookup: last-record accessors and value-at-time queries.

The history is a right-continuous step function: the value in force at time t
belongs to the record with the greatest time not exceeding t.
"""

from typing import Iterator, Tuple

import structlog

from pricehistory.engine.decoder import (
    History,
    iter_segments,
    last_effective_value,
    last_record_time,
    record_count,
)
from pricehistory.models.channel import PRICE_WITH_SHIPPING, ChannelDescriptor
from pricehistory.models.results import NO_DATA, PriceAndAuxCost

logger = structlog.get_logger(__name__)


def last_time(seq: History, channel: ChannelDescriptor) -> int:
    """
    Time of the last registered change, or -1 if the history is empty.

    This is the last time the value changed, not the last time it was observed.
    """
    return last_record_time(seq, channel)


def last_value(seq: History, channel: ChannelDescriptor) -> int:
    """Effective value of the last record, or -1 if the history is empty."""
    return last_effective_value(seq, channel)


def value_at_time(seq: History, time: int, channel: ChannelDescriptor) -> int:
    """
    Effective value in force at ``time``.

    Args:
        seq: Encoded history
        time: Lookup time in minutes
        channel: Channel layout

    Returns:
        The effective value, -1 if ``time`` precedes the first record, or the
        sentinel itself if the series was unavailable at that time.
    """
    selected = None
    for segment in iter_segments(seq, channel):
        if segment.time > time:
            break
        selected = segment

    if selected is None:
        logger.debug("lookup_before_first_record", channel=channel.name, time=time)
        return NO_DATA
    return selected.value


def closest_value_at_time(seq: History, time: int, channel: ChannelDescriptor) -> int:
    """
    Closest known value at ``time``, skipping over unavailable stretches.

    Selects the record in force at ``time`` (the first record when ``time``
    precedes the history). If that record is the sentinel, the scan moves
    forward to the next available record. When no later record is available
    the last value is returned, which may itself be the sentinel.
    """
    found = None
    for segment in iter_segments(seq, channel):
        if found is None or segment.time <= time:
            found = segment
            continue
        if not found.is_unavailable:
            return found.value
        if not segment.is_unavailable:
            return segment.value

    if found is None:
        return NO_DATA
    # found is the final record here, or every record after it was unavailable
    return last_effective_value(seq, channel)


def last_delta(seq: History, channel: ChannelDescriptor) -> int:
    """
    Change between the effective values of the last two records.

    Returns 0 when fewer than two records exist or either value is the sentinel.
    """
    count = record_count(seq, channel)
    if count < 2:
        return 0

    previous = current = None
    for segment in iter_segments(seq, channel):
        previous, current = current, segment

    if previous.is_unavailable or current.is_unavailable:
        return 0
    return current.value - previous.value


def _raw_records(seq: History) -> Iterator[Tuple[int, int, int]]:
    count = record_count(seq, PRICE_WITH_SHIPPING)
    for offset in range(0, count * 3, 3):
        yield seq[offset], seq[offset + 1], seq[offset + 2]


def price_and_aux_cost_at_time(seq: History, time: int) -> PriceAndAuxCost:
    """
    Raw (price, aux_cost) pair in force at ``time`` on a 3-wide channel.

    Returns (-1, -1) if ``time`` precedes the first record or the history is
    empty. The pair is returned uncombined, sentinels included.
    """
    selected = None
    for record in _raw_records(seq):
        if record[0] > time:
            break
        selected = record

    if selected is None:
        return PriceAndAuxCost()
    return PriceAndAuxCost(price=selected[1], aux_cost=selected[2])


def last_price_and_aux_cost(seq: History) -> PriceAndAuxCost:
    """Raw (price, aux_cost) pair of the final record on a 3-wide channel."""
    count = record_count(seq, PRICE_WITH_SHIPPING)
    if count == 0:
        return PriceAndAuxCost()
    offset = (count - 1) * 3
    return PriceAndAuxCost(price=seq[offset + 1], aux_cost=seq[offset + 2])


__all__ = [
    "last_time",
    "last_value",
    "value_at_time",
    "closest_value_at_time",
    "last_delta",
    "price_and_aux_cost_at_time",
    "last_price_and_aux_cost",
]
