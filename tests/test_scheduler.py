from itertools import combinations

import pytest

from eventsched.models import Event
from eventsched.scheduler import (
    events_conflict,
    find_available_time_slot,
    minutes_to_time,
    parse_time,
    smart_schedule,
)


def _event(name, start, end, venue="Hall", date="2024-05-01", priority=False, duration=0):
    return Event(
        username="user",
        event_name=name,
        venue=venue,
        date=date,
        start_time=start,
        end_time=end,
        priority=priority,
        duration=duration,
    )


def test_time_round_trip_whole_day():
    for minutes in range(24 * 60):
        assert parse_time(minutes_to_time(minutes)) == minutes


def test_minutes_to_time_midnight():
    assert minutes_to_time(0) == "00:00"


def test_parse_time_is_ordered():
    assert parse_time("08:59") < parse_time("09:00") < parse_time("23:59")


@pytest.mark.parametrize("text", ["", "noon", "24:00", "12:60", "ab:cd"])
def test_parse_time_rejects_bad_input(text):
    with pytest.raises(ValueError, match="Unsupported time format"):
        parse_time(text)


def test_conflict_requires_same_venue_and_date():
    a = _event("a", "10:00", "11:00")
    assert not events_conflict(a, _event("b", "10:00", "11:00", venue="Other"))
    assert not events_conflict(a, _event("b", "10:00", "11:00", date="2024-05-02"))
    assert events_conflict(a, _event("b", "10:30", "11:30"))


def test_conflict_respects_gap():
    a = _event("a", "10:00", "11:00")
    assert events_conflict(a, _event("b", "11:30", "12:00"))
    assert not events_conflict(a, _event("b", "12:00", "13:00"))
    assert not events_conflict(a, _event("b", "11:30", "12:00"), 0)


def test_conflict_is_symmetric():
    a = _event("a", "10:00", "11:00")
    b = _event("b", "11:45", "12:30")
    assert events_conflict(a, b) == events_conflict(b, a)


def test_preferred_slot_used_when_free():
    event = _event("a", "10:00", "11:00", duration=60)
    preferred = parse_time("10:00")
    assert find_available_time_slot(event, [], preferred) == (preferred, preferred + 60)


def test_slot_avoids_existing_booking():
    busy = _event("busy", "10:00", "12:00")
    event = _event("new", "10:00", "11:00", duration=60)
    start, end = find_available_time_slot(event, [busy], parse_time("10:00"))
    assert end - start == 60
    moved = _event("new", minutes_to_time(start), minutes_to_time(end))
    assert not events_conflict(moved, busy)


def test_other_venue_does_not_block():
    busy = _event("busy", "10:00", "12:00", venue="Elsewhere")
    event = _event("new", "10:00", "11:00", duration=60)
    preferred = parse_time("10:00")
    assert find_available_time_slot(event, [busy], preferred) == (preferred, preferred + 60)


def test_full_day_falls_back_to_midnight():
    busy = _event("busy", "00:00", "23:59")
    event = _event("new", "10:00", "11:00", duration=60)
    assert find_available_time_slot(event, [busy], parse_time("10:00")) == (0, 60)


def test_smart_schedule_removes_conflicts():
    events = [_event(f"e{i}", "10:00", "11:00") for i in range(3)]
    result = smart_schedule(events)
    assert len(result) == 3
    for a, b in combinations(result, 2):
        assert not events_conflict(a, b)
    for event in result:
        assert event.duration == 60
        assert parse_time(event.end_time) - parse_time(event.start_time) == 60


def test_smart_schedule_does_not_mutate_input():
    events = [_event("a", "10:00", "11:00"), _event("b", "10:00", "11:00")]
    smart_schedule(events)
    assert [(e.start_time, e.end_time, e.duration) for e in events] == [
        ("10:00", "11:00", 0),
        ("10:00", "11:00", 0),
    ]


def test_smart_schedule_priority_first():
    regular = _event("regular", "09:00", "10:00")
    urgent = _event("urgent", "12:00", "13:00", priority=True)
    result = smart_schedule([regular, urgent])
    assert [e.event_name for e in result] == ["urgent", "regular"]
    assert [e.start_time for e in result] == ["12:00", "09:00"]


def test_smart_schedule_priority_keeps_its_time():
    regular = _event("regular", "10:00", "11:00")
    urgent = _event("urgent", "10:00", "11:00", priority=True)
    result = smart_schedule([regular, urgent])
    by_name = {e.event_name: e for e in result}
    assert by_name["urgent"].start_time == "10:00"
    assert by_name["regular"].start_time != "10:00"
    assert not events_conflict(by_name["urgent"], by_name["regular"])


def test_smart_schedule_bad_time_raises():
    with pytest.raises(ValueError):
        smart_schedule([_event("a", "later", "11:00")])