"""Venue-aware event scheduling with a minimum gap between bookings."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, Iterator, Sequence

from .models import Event

_DAY_MINUTES = 24 * 60
_MIN_GAP = 60
_TIME_RE = re.compile(r"\s*(\d{1,2}):(\d{1,2})")


def parse_time(time_str: str) -> int:
    """Convert an ``HH:MM`` string into minutes after midnight."""
    match = _TIME_RE.match(time_str)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour <= 23 and minute <= 59:
            return hour * 60 + minute
    raise ValueError(f"Unsupported time format: {time_str}")


def minutes_to_time(minutes: int) -> str:
    """Format minutes after midnight as ``HH:MM``."""
    hours, mins = divmod(abs(minutes), 60)
    if minutes < 0:
        hours, mins = -hours, -mins
    return f"{hours:02d}:{mins:02d}"


def _overlaps(start: int, end: int, other_start: int, other_end: int, gap: int) -> bool:
    return not (end + gap <= other_start or start >= other_end + gap)


def events_conflict(e1: Event, e2: Event, min_gap_minutes: int = _MIN_GAP) -> bool:
    """Tell whether two events at the same venue and date are too close."""
    if e1.date != e2.date or e1.venue != e2.venue:
        return False
    return _overlaps(
        parse_time(e1.start_time),
        parse_time(e1.end_time),
        parse_time(e2.start_time),
        parse_time(e2.end_time),
        min_gap_minutes,
    )


def _circular_distance(start: int, preferred: int) -> int:
    diff = abs(start - preferred)
    return min(diff, _DAY_MINUTES - diff)


def _candidate_starts(preferred: int, duration: int) -> Iterator[int]:
    yield preferred

    blocks = [hour * 60 for hour in range(24) if hour * 60 + duration <= _DAY_MINUTES]
    yield from sorted(blocks, key=lambda block: _circular_distance(block, preferred))

    for step in range(1, 25):
        offset = step * step * 60
        for probe in ((preferred + offset) % _DAY_MINUTES, (preferred - offset) % _DAY_MINUTES):
            probe = probe // 60 * 60
            if probe + duration <= _DAY_MINUTES:
                yield probe

    yield from (hour * 60 for hour in range(24))


def find_available_time_slot(
    event: Event, scheduled: Iterable[Event], preferred_start_time: int
) -> tuple[int, int]:
    """Find a ``(start, end)`` slot in minutes that keeps clear of ``scheduled``."""
    duration = event.duration
    busy = [
        (parse_time(other.start_time), parse_time(other.end_time))
        for other in scheduled
        if other.venue == event.venue and other.date == event.date
    ]

    def fits(start: int) -> bool:
        end = start + duration
        return not any(_overlaps(start, end, s, e, _MIN_GAP) for s, e in busy)

    return next(
        ((start, start + duration) for start in _candidate_starts(preferred_start_time, duration) if fits(start)),
        (0, duration),
    )


def smart_schedule(events: Sequence[Event]) -> list[Event]:
    """Schedule events, moving any that clash to the nearest free slot.

    Events are ordered by date, venue, priority first, then start time.
    The input events are left untouched.
    """
    prepared = [
        replace(event, duration=parse_time(event.end_time) - parse_time(event.start_time))
        for event in events
    ]
    prepared.sort(key=lambda e: (e.date, e.venue, not e.priority, parse_time(e.start_time)))

    scheduled: list[Event] = []
    for event in prepared:
        if any(events_conflict(event, other, _MIN_GAP) for other in scheduled):
            start, end = find_available_time_slot(event, scheduled, parse_time(event.start_time))
            event = replace(event, start_time=minutes_to_time(start), end_time=minutes_to_time(end))
        scheduled.append(event)
    return scheduled