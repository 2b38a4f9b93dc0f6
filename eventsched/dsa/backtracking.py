"""Slot assignment by backtracking over a fixed set of slots."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Sequence

_SLOTS = (0, 1, 2)


class BacktrackingScheduler:
    """Assign each event one of three slots so that no conflicting pair shares one."""

    def __init__(self, events: Iterable[int], conflicts: Mapping[int, Sequence[int]]):
        self.events = list(events)
        self.conflicts = {event: list(others) for event, others in conflicts.items()}

    def _can_assign(self, event: int, slot: int, solution: dict[int, int]) -> bool:
        return all(solution.get(other) != slot for other in self.conflicts.get(event, ()))

    def _solve(self) -> dict[int, int] | None:
        solution: dict[int, int] = {}
        pending: list[Iterator[int]] = [iter(_SLOTS)]
        while pending:
            depth = len(pending) - 1
            if depth == len(self.events):
                return solution
            event = self.events[depth]
            solution.pop(event, None)
            for slot in pending[-1]:
                if self._can_assign(event, slot, solution):
                    solution[event] = slot
                    pending.append(iter(_SLOTS))
                    break
            else:
                pending.pop()
        return None

    def get_schedule(self) -> dict[int, int]:
        """Return event-to-slot assignments, or an empty dict when none exists."""
        solution = self._solve()
        return dict(sorted(solution.items())) if solution else {}