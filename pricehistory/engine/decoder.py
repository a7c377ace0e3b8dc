"""
Sequence Decoder: shared interpretation of the encoded history layout.

A history is a flat integer sequence of fixed-width records:

    [time, value, time, value, ...]                      (width 2)
    [time, value, aux_cost, time, value, aux_cost, ...]  (width 3)

Each record means "the value became X at time T and stays X until the next
record's time". Times are minutes and never decrease. A value of -1 is the
unavailable sentinel; an aux_cost of -1 means "unknown" and counts as 0.

Every query module walks the sequence through iter_segments() so the record
width arithmetic lives in exactly one place.
"""

from typing import Iterator, Optional, Sequence

from pricehistory.models.channel import ChannelDescriptor
from pricehistory.models.results import NO_DATA, Segment

MINUTES_PER_DAY = 24 * 60

# Open upper bound for windows that run through the present and beyond
UNBOUNDED = 2**31 - 1

History = Optional[Sequence[int]]


def record_width(channel: ChannelDescriptor) -> int:
    """Number of integers per record for this channel."""
    return channel.record_width


def record_count(seq: History, channel: ChannelDescriptor) -> int:
    """Number of complete records; a trailing partial record is ignored."""
    if not seq:
        return 0
    return len(seq) // record_width(channel)


def effective_value(value: int, aux_cost: Optional[int] = None) -> int:
    """
    Combine a primary value with an optional auxiliary cost.

    A negative primary value (the sentinel) propagates unchanged and the
    auxiliary cost is ignored. A negative auxiliary cost counts as 0.

    Example:
        >>> effective_value(10, 2)
        12
        >>> effective_value(20, -1)
        20
        >>> effective_value(-1, 5)
        -1
    """
    if value < 0:
        return value
    if aux_cost is None or aux_cost < 0:
        return value
    return value + aux_cost


def _value_at_offset(seq: Sequence[int], offset: int, channel: ChannelDescriptor) -> int:
    # offset points at the record's time field
    if channel.has_auxiliary_cost:
        return effective_value(seq[offset + 1], seq[offset + 2])
    return seq[offset + 1]


def last_record_time(seq: History, channel: ChannelDescriptor) -> int:
    """Time of the final record, or -1 if there is none."""
    count = record_count(seq, channel)
    if count == 0:
        return NO_DATA
    return seq[(count - 1) * record_width(channel)]


def last_effective_value(seq: History, channel: ChannelDescriptor) -> int:
    """Effective value of the final record, or -1 if there is none."""
    count = record_count(seq, channel)
    if count == 0:
        return NO_DATA
    return _value_at_offset(seq, (count - 1) * record_width(channel), channel)


def iter_segments(
    seq: History,
    channel: ChannelDescriptor,
    horizon: int = UNBOUNDED,
) -> Iterator[Segment]:
    """
    Lazily walk the history as segments, oldest first.

    Each segment is a record plus the time its value stays in force: the next
    record's time, or ``horizon`` for the final record. The iterator is
    forward-only; callers stop consuming as soon as they have their answer.

    Args:
        seq: Encoded history (may be None or empty)
        channel: Channel layout
        horizon: End time assigned to the final record

    Yields:
        Segment(time, value, end, is_last) with value already combined
    """
    count = record_count(seq, channel)
    width = record_width(channel)
    for index in range(count):
        offset = index * width
        is_last = index == count - 1
        end = horizon if is_last else seq[offset + width]
        yield Segment(
            time=seq[offset],
            value=_value_at_offset(seq, offset, channel),
            end=end,
            is_last=is_last,
        )


def reaches_window(segment: Segment, start: int) -> bool:
    """
    Whether a segment that began before ``start`` is still in force at it.

    The final record holds indefinitely. Any other record holds until its
    successor, which counts as reaching the window when it changes at or after
    ``start``.
    """
    return segment.is_last or segment.end >= start


def clipped_duration(segment: Segment, start: int, end: int) -> int:
    """Part of the segment's in-force interval that lies inside [start, end)."""
    return max(0, min(segment.end, end) - max(segment.time, start))
