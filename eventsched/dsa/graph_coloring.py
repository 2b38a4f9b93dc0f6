"""Slot assignment by greedy colouring of the conflict graph."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable


class GraphColoringScheduler:
    """Colour events from a list of conflicting pairs, busiest events first."""

    def __init__(self, event_conflicts: Iterable[tuple[int, int]]):
        self.event_conflicts = [tuple(pair) for pair in event_conflicts]

    def assign_slots(self) -> dict[int, int]:
        """Return the lowest free slot for each event that appears in a conflict."""
        adjacency: dict[int, list[int]] = defaultdict(list)
        for first, second in self.event_conflicts:
            adjacency[first].append(second)
            adjacency[second].append(first)

        ordered = sorted(sorted(adjacency), key=lambda event: len(adjacency[event]), reverse=True)
        slots: dict[int, int] = {}
        for event in ordered:
            taken = {slots[n] for n in adjacency[event] if n in slots}
            free = next((s for s in range(len(adjacency) + 1) if s not in taken), None)
            if free is not None:
                slots[event] = free
        return dict(sorted(slots.items()))