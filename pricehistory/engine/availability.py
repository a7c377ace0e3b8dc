"""
Availability Analyzer: how much of a window a price channel spent unavailable.

Unavailability is the sentinel state (value -1, e.g. out of stock). The
percentage is derived from the available time inside the window: the scan
sums how long available values were in force, and whatever is not covered
counts as unavailable. That includes any part of the window before the first
record.
"""

from typing import Optional

import structlog

from pricehistory.engine.decoder import (
    History,
    iter_segments,
    reaches_window,
    record_count,
)
from pricehistory.models.channel import ChannelDescriptor
from pricehistory.models.results import NO_DATA

logger = structlog.get_logger(__name__)


def was_unavailable_in_interval(
    seq: History,
    start: int,
    end: int,
    channel: ChannelDescriptor,
) -> Optional[bool]:
    """
    Whether the series turned unavailable strictly inside (start, end).

    Returns:
        True on the first unavailable record in the window, False if there is
        none, None if the window is empty or the history too short to tell.
    """
    if start >= end or record_count(seq, channel) < 2:
        logger.debug("availability_unknown", channel=channel.name, start=start, end=end)
        return None

    for segment in iter_segments(seq, channel):
        if segment.time <= start:
            continue
        if segment.time >= end:
            break
        if segment.is_unavailable:
            return True
    return False


def unavailable_percentage(
    seq: History,
    now: int,
    start: int,
    end: int,
    channel: ChannelDescriptor,
    tracking_since: int,
) -> int:
    """
    Percentage of [start, end) during which the series was unavailable.

    The window is narrowed to [max(start, tracking_since), min(end, now)):
    nothing can be said before tracking began or after ``now``.

    Args:
        seq: Encoded history
        now: Current time in minutes
        start: Window start in minutes, may be 0
        end: Window end in minutes, may be UNBOUNDED
        channel: Channel layout; must be a price channel
        tracking_since: Time tracking of this series began

    Returns:
        0..100 (100 means unavailable for the whole window), or -1 for non-price
        channels, empty requested windows and histories that start after the
        window. A window that is empty only after narrowing still goes through
        the scan, so an available value already in force reports 0.
    """
    if not channel.is_primary_metric:
        return NO_DATA
    if start >= end:
        return NO_DATA

    count = record_count(seq, channel)
    if count == 0:
        return NO_DATA

    if seq[0] > end or tracking_since > end:
        logger.debug("history_starts_after_window", channel=channel.name, end=end)
        return NO_DATA

    start = max(start, tracking_since)
    end = min(end, now)

    available = 0
    for segment in iter_segments(seq, channel, horizon=end):
        if segment.time >= end:
            break
        if segment.is_unavailable:
            continue

        if segment.time >= start:
            if count == 1:
                return 0
            available += min(segment.end, end) - segment.time
        else:
            # Available value already in force when the window opens
            if segment.is_last or segment.end >= end:
                return 0
            if reaches_window(segment, start):
                available = segment.end - start

    if available == 0:
        return 100
    if end <= start:
        logger.debug("window_empty_after_clamp", channel=channel.name, start=start, end=end)
        return NO_DATA
    return 100 - (available * 100) // (end - start)
