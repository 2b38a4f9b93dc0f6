"""Iterative segment tree for range sums."""

from __future__ import annotations

from typing import Sequence


class SegmentTreeScheduler:
    """Sum segment tree stored in a flat list of size ``2 * n``."""

    def __init__(self, arr: Sequence[int]):
        self._n = len(arr)
        self.tree: list[int] = [0] * self._n + list(arr)
        for pos in range(self._n - 1, 0, -1):
            self.tree[pos] = self.tree[2 * pos] + self.tree[2 * pos + 1]

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        pos = index + self._n
        self.tree[pos] = value
        while pos > 1:
            pos //= 2
            self.tree[pos] = self.tree[2 * pos] + self.tree[2 * pos + 1]

    def range_query(self, left: int, right: int) -> int:
        """Return the sum of elements in the half-open range ``[left, right)``."""
        if left < 0 or right > self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")
        left += self._n
        right += self._n
        total = 0
        while left < right:
            if left % 2:
                total += self.tree[left]
                left += 1
            if right % 2:
                right -= 1
                total += self.tree[right]
            left //= 2
            right //= 2
        return total