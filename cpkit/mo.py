"""Offline distinct-value counting over ranges with Mo's algorithm."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from math import isqrt


class _Window:
    """A sliding multiset that tracks how many distinct values it holds."""

    def __init__(self) -> None:
        self._counts: Counter[Hashable] = Counter()
        self.distinct = 0

    def add(self, value: Hashable) -> None:
        if self._counts[value] == 0:
            self.distinct += 1
        self._counts[value] += 1

    def remove(self, value: Hashable) -> None:
        self._counts[value] -= 1
        if self._counts[value] <= 0:
            self.distinct -= 1


def count_distinct_in_ranges(
    values: Sequence[Hashable], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the number of distinct values in each inclusive, 0-based range of ``queries``.

    Answers come back in the order the queries were given.
    """
    values = list(values)
    queries = [(int(left), int(right)) for left, right in queries]
    if not queries:
        return []
    n = len(values)
    for left, right in queries:
        if left > right:
            raise ValueError(f"range [{left}, {right}] has left after right")
        if not 0 <= left <= right < n:
            raise IndexError(f"range [{left}, {right}] is invalid for length {n}")

    block = isqrt(n - 1) + 1
    order = sorted(
        range(len(queries)), key=lambda i: (queries[i][0] // block, queries[i][1])
    )

    window = _Window()
    lo = hi = 0
    window.add(values[0])
    answers = [0] * len(queries)
    for index in order:
        left, right = queries[index]
        while left < lo:
            lo -= 1
            window.add(values[lo])
        while right > hi:
            hi += 1
            window.add(values[hi])
        while left > lo:
            window.remove(values[lo])
            lo += 1
        while right < hi:
            window.remove(values[hi])
            hi -= 1
        answers[index] = window.distinct
    return answers