"""
Extreme Value Finder: lowest and highest effective value over a window.

Windows are half-open [start, end). A record that began before the window
still counts when its value is in force at the window start; it is then
reported at ``start``, the moment the window begins to see that value.
Unavailable records never take part.
"""

from typing import Optional, Tuple

import structlog

from pricehistory.engine.decoder import (
    UNBOUNDED,
    History,
    iter_segments,
    reaches_window,
    record_count,
)
from pricehistory.models.channel import ChannelDescriptor
from pricehistory.models.results import ExtremePoints

logger = structlog.get_logger(__name__)


def extremes_in_interval(
    seq: History,
    start: int,
    end: int,
    channel: ChannelDescriptor,
) -> ExtremePoints:
    """
    Find the lowest and highest effective value in [start, end).

    Args:
        seq: Encoded history
        start: Window start in minutes, may be 0
        end: Window end in minutes, may be UNBOUNDED
        channel: Channel layout

    Returns:
        ExtremePoints(min_time, min_value, max_time, max_value); all -1 when
        the history is too short, the window is empty or nothing qualifies.
        On ties the earliest occurrence wins.
    """
    if record_count(seq, channel) < 2 or start >= end:
        logger.debug("window_rejected", channel=channel.name, start=start, end=end)
        return ExtremePoints()

    first_time = seq[0]
    if first_time > end:
        logger.debug("history_starts_after_window", channel=channel.name, end=end)
        return ExtremePoints()

    # Nothing is known before the first record
    start = max(start, first_time)

    lowest: Optional[Tuple[int, int]] = None
    highest: Optional[Tuple[int, int]] = None

    for segment in iter_segments(seq, channel):
        if segment.time >= end:
            break
        if segment.is_unavailable:
            continue

        if segment.time >= start:
            at = segment.time
        elif reaches_window(segment, start):
            at = start
        else:
            continue

        if lowest is None or segment.value < lowest[1]:
            lowest = (at, segment.value)
        if highest is None or segment.value > highest[1]:
            highest = (at, segment.value)

    if lowest is None:
        return ExtremePoints()
    return ExtremePoints(lowest[0], lowest[1], highest[0], highest[1])


def lowest_and_highest(seq: History, channel: ChannelDescriptor) -> Tuple[int, int]:
    """Lowest and highest effective value of the whole history, (-1, -1) if none."""
    points = extremes_in_interval(seq, 0, UNBOUNDED, channel)
    return points.min_value, points.max_value


def lowest_and_highest_with_time(seq: History, channel: ChannelDescriptor) -> ExtremePoints:
    """Lowest and highest effective value of the whole history with their times."""
    return extremes_in_interval(seq, 0, UNBOUNDED, channel)
