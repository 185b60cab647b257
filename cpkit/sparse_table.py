"""Sparse table for range-minimum queries over a static sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class SparseTable:
    """Range-minimum sparse table; ``table[j][i]`` holds the minimum of ``values[i:i + 2**j]``."""

    def __init__(self, values: Sequence[Any]) -> None:
        self._n = len(values)
        self._table: list[list[Any]] = [list(values)]
        span = 2
        while span <= self._n:
            previous = self._table[-1]
            half = span // 2
            self._table.append(
                [min(previous[i], previous[i + half]) for i in range(self._n - span + 1)]
            )
            span *= 2

    def __len__(self) -> int:
        return self._n

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] is invalid for length {self._n}")

    def query(self, left: int, right: int) -> Any:
        """Return the minimum of the inclusive range in O(1) using two overlapping blocks."""
        self._check(left, right)
        k = (right - left + 1).bit_length() - 1
        row = self._table[k]
        return min(row[left], row[right - (1 << k) + 1])

    def query_by_lifting(self, left: int, right: int) -> Any:
        """Return the minimum of the inclusive range by covering it with disjoint power-of-two blocks."""
        self._check(left, right)
        best = None
        for k in reversed(range(len(self._table))):
            if left + (1 << k) - 1 <= right:
                candidate = self._table[k][left]
                best = candidate if best is None else min(best, candidate)
                left += 1 << k
        return best