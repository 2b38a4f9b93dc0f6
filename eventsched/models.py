"""Event records exchanged with the scheduling service."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

_STRING_FIELDS = ("username", "event_name", "venue", "date", "start_time", "end_time")


@dataclass
class Event:
    """A booked event at a venue on a given date."""

    username: str
    event_name: str
    venue: str
    date: str
    start_time: str
    end_time: str
    priority: bool = False
    duration: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the event as a JSON-ready dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """Build an event from a mapping; every field must be present."""
        if not isinstance(data, Mapping):
            raise ValueError("event must be an object")
        missing = [f.name for f in fields(cls) if f.name not in data]
        if missing:
            raise ValueError(f"missing field: {missing[0]}")
        for name in _STRING_FIELDS:
            if not isinstance(data[name], str):
                raise ValueError(f"field {name!r} must be a string")
        priority = data["priority"]
        if not isinstance(priority, bool):
            raise ValueError("field 'priority' must be a boolean")
        duration = data["duration"]
        if not isinstance(duration, (int, float)):
            raise ValueError("field 'duration' must be a number")
        return cls(
            **{name: data[name] for name in _STRING_FIELDS},
            priority=priority,
            duration=int(duration),
        )