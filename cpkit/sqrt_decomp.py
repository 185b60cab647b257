"""Square-root decomposition for range sums with point updates."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt


class SqrtDecomposition:
    """Range-sum structure splitting the array into blocks of about sqrt(n) elements."""

    def __init__(self, values: Sequence[int]) -> None:
        self._values = list(values)
        n = len(self._values)
        self._block = isqrt(n - 1) + 1 if n else 1
        self._blocks = [
            sum(self._values[start : start + self._block]) for start in range(0, n, self._block)
        ]

    def __len__(self) -> int:
        return len(self._values)

    def query(self, left: int, right: int) -> int:
        """Return the sum of the inclusive range ``[left, right]``."""
        if not 0 <= left <= right < len(self._values):
            raise IndexError(f"range [{left}, {right}] is invalid for length {len(self)}")
        first, last = left // self._block, right // self._block
        if first == last:
            return sum(self._values[left : right + 1])
        head = sum(self._values[left : (first + 1) * self._block])
        middle = sum(self._blocks[first + 1 : last])
        tail = sum(self._values[last * self._block : right + 1])
        return head + middle + tail

    def update(self, pos: int, value: int) -> None:
        """Set the element at ``pos`` to ``value``."""
        if not 0 <= pos < len(self._values):
            raise IndexError(f"position {pos} is out of range")
        self._blocks[pos // self._block] += value - self._values[pos]
        self._values[pos] = value