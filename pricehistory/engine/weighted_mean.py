"""
Weighted Mean Calculator: duration-weighted average over a trailing window.

Each available value is weighted by how long it stayed in force inside the
window [now - days, now). The record in force when the window opens only
contributes the part of its interval that falls inside the window.
Unavailable stretches carry no weight at all.

Weights are integer minutes and the final division is a floor division, so
the result does not depend on the order or size of the intervals.
"""

import structlog

from pricehistory.engine.decoder import (
    MINUTES_PER_DAY,
    History,
    clipped_duration,
    iter_segments,
    last_record_time,
    reaches_window,
    record_count,
)
from pricehistory.models.channel import ChannelDescriptor
from pricehistory.models.results import NO_DATA

logger = structlog.get_logger(__name__)

# Histories spanning less than this are too short for a meaningful mean
MIN_HISTORY_DAYS = 7


def weighted_mean(
    seq: History,
    now: int,
    days: float,
    channel: ChannelDescriptor,
) -> int:
    """
    Duration-weighted mean of the effective value over the last ``days``.

    Args:
        seq: Encoded history
        now: Current time in minutes; the window ends here
        days: Window length in days (e.g. 30, 90, 180); math.inf means the
            whole tracked span
        channel: Channel layout

    Returns:
        floor(sum(value * minutes) / sum(minutes)), or -1 if the history has
        fewer than two records, spans under MIN_HISTORY_DAYS, ``days`` is not
        a positive number, or no available value falls inside the window.
    """
    if record_count(seq, channel) < 2:
        logger.debug("insufficient_records", channel=channel.name)
        return NO_DATA

    tracked_minutes = last_record_time(seq, channel) - seq[0]
    if tracked_minutes < MIN_HISTORY_DAYS * MINUTES_PER_DAY:
        logger.debug(
            "insufficient_history",
            channel=channel.name,
            tracked_minutes=tracked_minutes,
        )
        return NO_DATA

    requested_minutes = days * MINUTES_PER_DAY
    if not requested_minutes > 0:
        # NaN, zero and negative windows hold no weight
        logger.debug("window_rejected", channel=channel.name, days=days)
        return NO_DATA

    if tracked_minutes < requested_minutes:
        # Only whole days of history are used; an infinite window lands here too
        window_minutes = (tracked_minutes // MINUTES_PER_DAY) * MINUTES_PER_DAY
    else:
        window_minutes = int(requested_minutes)
    window_start = now - window_minutes

    weighted_sum = 0
    total_weight = 0

    for segment in iter_segments(seq, channel, horizon=now):
        if segment.time >= now:
            break
        if segment.is_unavailable:
            continue
        if segment.time < window_start and not reaches_window(segment, window_start):
            continue

        weight = clipped_duration(segment, window_start, now)
        weighted_sum += segment.value * weight
        total_weight += weight

    if total_weight == 0:
        logger.debug("no_weight_in_window", channel=channel.name, now=now, days=days)
        return NO_DATA
    return weighted_sum // total_weight
