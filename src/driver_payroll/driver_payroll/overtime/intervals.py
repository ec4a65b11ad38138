"""Interval arithmetic on the 1440-minute day ring.

Shifts are absolute intervals ``[start, end)`` on a minute axis that begins at
midnight of the work day; windows are times of day and repeat every day.
"""

from __future__ import annotations

from typing import Iterable

from ..core.constants import LATE_NIGHT_END, LATE_NIGHT_START, LATE_NIGHT_START_DAYTIME_ORIGIN, MINUTES_PER_DAY
from .model import ShiftTimeline


def overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> int:
    return max(0, min(a_end, b_end) - max(a_start, b_start))


def ring_overlap(start: int, end: int, window_start: int, window_end: int) -> int:
    """Minutes of ``[start, end)`` whose time of day lies in ``[window_start, window_end)``.

    A window with ``window_end <= window_start`` wraps past midnight.
    """
    if end <= start:
        return 0
    if window_end <= window_start:
        window_end += MINUTES_PER_DAY
    first_day = (start - window_end) // MINUTES_PER_DAY
    last_day = (end - window_start) // MINUTES_PER_DAY
    return sum(
        overlap(start, end, window_start + day * MINUTES_PER_DAY, window_end + day * MINUTES_PER_DAY)
        for day in range(first_day, last_day + 1)
    )


def late_night_window_start(start_minute: int) -> int:
    """Start of the late-night window for a shift starting at ``start_minute``.

    Overnight-origin shifts (starting before 05:00, which includes the
    early-origin shifts before 04:00) use 22:00; daytime-origin shifts use 22:15.
    """
    if start_minute < LATE_NIGHT_END:
        return LATE_NIGHT_START
    return LATE_NIGHT_START_DAYTIME_ORIGIN


def worked_segments(timeline: ShiftTimeline) -> list[tuple[int, int]]:
    """The shift with a trailing deficit break cut out."""
    interval = timeline.break_interval
    if interval is None:
        return [(timeline.start, timeline.end)]
    return [(timeline.start, interval[0])]


def late_night_minutes(timeline: ShiftTimeline) -> int:
    window_start = late_night_window_start(timeline.start % MINUTES_PER_DAY)
    return _sum_window(worked_segments(timeline), window_start, LATE_NIGHT_END)


def _sum_window(segments: Iterable[tuple[int, int]], window_start: int, window_end: int) -> int:
    return sum(ring_overlap(s, e, window_start, window_end) for s, e in segments)
