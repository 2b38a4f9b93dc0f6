"""Slot assignment ordered by number of conflicts using a min-heap."""

from __future__ import annotations

import heapq
from typing import Mapping, Sequence


class PriorityQueueScheduler:
    """Hand out consecutive slots, events with fewest conflicts first."""

    def __init__(self, event_conflicts: Mapping[int, Sequence[int]]):
        self.event_conflicts = {event: list(others) for event, others in event_conflicts.items()}

    def assign_slots(self) -> dict[int, int]:
        """Return a distinct slot for each event, counting up from zero."""
        heap = [(len(others), event) for event, others in self.event_conflicts.items()]
        heapq.heapify(heap)
        slots: dict[int, int] = {}
        slot = 0
        while heap:
            _, event = heapq.heappop(heap)
            slots[event] = slot
            slot += 1
        return dict(sorted(slots.items()))