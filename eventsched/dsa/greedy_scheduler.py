"""Slot assignment in order of fewest conflicts first."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence


class GreedyScheduler:
    """Give each event the lowest slot not used by a conflicting event."""

    def __init__(self, events: Iterable[int], conflicts: Mapping[int, Sequence[int]]):
        self.events = list(events)
        self.conflicts = {event: list(others) for event, others in conflicts.items()}

    def assign_slots(self) -> dict[int, int]:
        """Return event-to-slot assignments; every event needs a conflicts entry."""
        missing = next((e for e in self.events if e not in self.conflicts), None)
        if missing is not None:
            raise KeyError(f"no conflicts entry for event {missing}")

        ordered = sorted(self.events, key=lambda event: len(self.conflicts[event]))
        slots: dict[int, int] = {}
        for event in ordered:
            taken = {slots[n] for n in self.conflicts[event] if n in slots}
            slot = 0
            while slot in taken:
                slot += 1
            slots[event] = slot
        return dict(sorted(slots.items()))