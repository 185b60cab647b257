"""Counting helpers: inclusion-exclusion, coordinate compression and cycle finding."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from functools import reduce
from itertools import combinations
from math import gcd


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def count_multiples(n: int, divisors: Sequence[int]) -> int:
    """Count the integers in ``[1, n]`` divisible by at least one of ``divisors``."""
    if any(d <= 0 for d in divisors):
        raise ValueError("divisors must be positive")
    if n < 1:
        return 0
    total = 0
    for size in range(1, len(divisors) + 1):
        sign = 1 if size % 2 else -1
        for subset in combinations(divisors, size):
            common = reduce(lcm, subset, 1)
            if common <= n:
                total += sign * (n // common)
    return total


def count_free(low: int, high: int, divisors: Sequence[int]) -> int:
    """Count the integers in ``[low, high]`` divisible by none of ``divisors``."""
    if low > high:
        raise ValueError("low must not exceed high")
    divisible = count_multiples(high, divisors) - count_multiples(low - 1, divisors)
    return high - low + 1 - divisible


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank among the distinct values (0-based)."""
    distinct = sorted(set(values))
    return [bisect_left(distinct, v) for v in values]


def rank_by_last_position(values: Sequence[int]) -> list[int]:
    """Replace each value by the last index it occupies in the sorted sequence."""
    last = {v: i for i, v in enumerate(sorted(values))}
    return [last[v] for v in values]


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value in ``nums`` of length n+1 holding values in ``[1, n]``.

    Uses Floyd's tortoise-and-hare cycle detection.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    tortoise = hare = nums[0]
    while True:
        tortoise = nums[tortoise]
        hare = nums[nums[hare]]
        if tortoise == hare:
            break
    tortoise = nums[0]
    while tortoise != hare:
        tortoise = nums[tortoise]
        hare = nums[hare]
    return hare