# eventsched

Conflict-aware event scheduling, usable as a Python library or as a small
JSON web service.

The package has two parts:

- **Smart scheduling** of real events (venue, date, start and end time,
  priority). Events in the same venue on the same date must be at least an
  hour apart; an event that clashes is moved to the nearest free slot.
- **Slot-assignment algorithms** over integer event ids and their
  conflicts: graph colouring, backtracking, greedy, priority queue, and a
  sum segment tree.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Smart scheduling

```python
from eventsched.models import Event
from eventsched.scheduler import smart_schedule

events = [
    Event.from_dict({
        "username": "alice",
        "event_name": "Keynote",
        "venue": "Hall A",
        "date": "2024-05-01",
        "start_time": "09:00",
        "end_time": "10:00",
        "priority": True,
        "duration": 0,
    }),
    Event.from_dict({
        "username": "bob",
        "event_name": "Workshop",
        "venue": "Hall A",
        "date": "2024-05-01",
        "start_time": "09:30",
        "end_time": "10:30",
        "priority": False,
        "duration": 0,
    }),
]

for event in smart_schedule(events):
    print(event.to_dict())
```

`Event` is a dataclass. `Event.from_dict` requires every field
(`username`, `event_name`, `venue`, `date`, `start_time`, `end_time`,
`priority`, `duration`) with the right type and raises `ValueError`
otherwise; `Event.to_dict` gives the event back as a plain dictionary.

`smart_schedule` returns new events and leaves its input untouched. It
recomputes each event's `duration` from its times, orders events by date,
venue, priority (priority events first) and start time, and keeps each event
where it is unless it clashes with one already placed. A clashing event is
moved by `find_available_time_slot`, which tries, in order: the preferred
start, whole-hour starts nearest the preferred start (distance measured
around the clock), quadratic probing on either side of it, every whole hour,
and finally midnight.

`events_conflict(e1, e2, min_gap_minutes=60)` tells whether two events at
the same venue and date are closer than the gap. Times are `HH:MM` strings;
`parse_time` turns them into minutes after midnight and `minutes_to_time`
turns minutes back into `HH:MM`. A time in any other form raises
`ValueError`.

## Slot-assignment algorithms

```python
from eventsched.dsa.graph_coloring import GraphColoringScheduler
from eventsched.dsa.backtracking import BacktrackingScheduler
from eventsched.dsa.greedy_scheduler import GreedyScheduler
from eventsched.dsa.priority_queue import PriorityQueueScheduler
from eventsched.dsa.segment_tree import SegmentTreeScheduler

# Conflicts as pairs of event ids; busiest events are coloured first.
GraphColoringScheduler([(1, 2), (2, 3)]).assign_slots()
# {1: 1, 2: 0, 3: 1}

# Events plus an adjacency map; at most three slots (0, 1, 2).
# An empty dict means no assignment with three slots exists.
BacktrackingScheduler([1, 2, 3], {1: [2], 2: [1, 3], 3: [2]}).get_schedule()
# {1: 0, 2: 1, 3: 0}

# Same input shape; events with fewer conflicts are placed first.
# Every event must have an entry in the map, or KeyError is raised.
GreedyScheduler([1, 2, 3], {1: [2], 2: [1, 3], 3: [2]}).assign_slots()
# {1: 0, 2: 1, 3: 0}

# Each event gets its own slot, least conflicted first.
PriorityQueueScheduler({1: [2], 2: [1, 3], 3: [2]}).assign_slots()
# {1: 0, 2: 2, 3: 1}

# Sum segment tree; range_query covers the half-open range [left, right).
tree = SegmentTreeScheduler([1, 2, 3, 4])
tree.range_query(0, 4)   # 10
tree.range_query(1, 3)   # 5
tree.update(0, 10)
tree.range_query(0, 2)   # 12
```

The segment tree's flat storage is available as `tree.tree`. An index or
range outside the array raises `IndexError`.

## Web service

Start the server:

```
eventsched-server
```

Options: `--host` (default `0.0.0.0`), `--port` (default `8080`) and
`--static-dir` (default `static`). The server serves `index.html` and other
files from the static directory at `/` and `/static/<file>`, adds permissive
CORS headers to every response, and answers JSON `POST` requests on these
routes (an `OPTIONS` request gets an empty 200):

| Route | Request body | Response |
|---|---|---|
| `/assign_slots/graph_coloring/` | `{"event_conflicts": [[1, 2], ...]}` | `{"event_slots": [[event, slot], ...]}` |
| `/assign_slots/backtracking/` | `{"events": [...], "conflicts": {"1": [2], ...}}` | `{"event_slots": [[event, slot], ...]}` |
| `/assign_slots/greedy/` | `{"events": [...], "conflicts": {"1": [2], ...}}` | `{"event_slots": [[event, slot], ...]}` |
| `/assign_slots/priority_queue/` | `{"event_conflicts": {"1": [2], ...}}` | `{"event_slots": [[event, slot], ...]}` |
| `/assign_slots/segment_tree/` | `{"array": [1, 2, 3]}` | `{"segment_tree": [...]}` |
| `/schedule_events/` | `{"events": [<event>, ...]}` | `{"scheduled_events": [...]}` |

Conflict maps may also be given as an array of `[event, [conflicts...]]`
pairs. The `event_slots` pairs are sorted by event id.

An invalid request to `/schedule_events/` is answered with status 400 and a
message starting with `Error: `. An invalid request to one of the
`/assign_slots/` routes is answered with an empty status 500.

To embed the service in another WSGI setup, build the application yourself:

```python
from eventsched.server import create_app

app = create_app("static")
```

## What it does not do

The service keeps nothing between requests: there is no storage of events,
users or schedules, and no authentication. The static directory is not
shipped with the package; supply your own `index.html` and assets.