"""Binary trie over fixed-width non-negative integers, for XOR and MEX queries."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

DEFAULT_BITS = 31


class _Node:
    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: list[Optional[_Node]] = [None, None]
        self.count = 0


class BitTrie:
    """Multiset of integers in ``[0, 2**bits)`` stored bit by bit from the highest bit.

    Every node counts how many stored values pass through it.
    """

    def __init__(self, bits: int = DEFAULT_BITS) -> None:
        if bits < 1:
            raise ValueError("bits must be at least 1")
        self.bits = bits
        self._root = _Node()

    def __len__(self) -> int:
        return self._root.count

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and 0 <= x < (1 << self.bits) and self.count(x) > 0

    def _levels(self) -> range:
        return range(self.bits - 1, -1, -1)

    def _check(self, x: int) -> None:
        if not 0 <= x < (1 << self.bits):
            raise ValueError(f"{x} does not fit in {self.bits} unsigned bits")

    def _require_values(self) -> None:
        if self._root.count == 0:
            raise ValueError("the trie is empty")

    @staticmethod
    def _live(node: Optional[_Node]) -> bool:
        return node is not None and node.count > 0

    def insert(self, x: int) -> None:
        """Add one occurrence of ``x``."""
        self._check(x)
        node = self._root
        node.count += 1
        for i in self._levels():
            bit = x >> i & 1
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _Node()
            child.count += 1
            node = child

    def count(self, x: int) -> int:
        """Return how many times ``x`` is stored."""
        self._check(x)
        node = self._root
        for i in self._levels():
            child = node.children[x >> i & 1]
            if not self._live(child):
                return 0
            node = child
        return node.count

    def remove(self, x: int) -> bool:
        """Remove one occurrence of ``x``; return False if it was not stored."""
        if self.count(x) == 0:
            return False
        node = self._root
        node.count -= 1
        for i in self._levels():
            node = node.children[x >> i & 1]
            node.count -= 1
        return True

    def min_xor(self, x: int) -> int:
        """Return the smallest ``x ^ v`` over the stored values ``v``."""
        self._check(x)
        self._require_values()
        node = self._root
        result = 0
        for i in self._levels():
            bit = x >> i & 1
            child = node.children[bit]
            if self._live(child):
                node = child
            else:
                result |= 1 << i
                node = node.children[bit ^ 1]
        return result

    def max_xor(self, x: int) -> int:
        """Return the largest ``x ^ v`` over the stored values ``v``."""
        self._check(x)
        self._require_values()
        node = self._root
        result = 0
        for i in self._levels():
            bit = x >> i & 1
            opposite = node.children[bit ^ 1]
            if self._live(opposite):
                result |= 1 << i
                node = opposite
            else:
                node = node.children[bit]
        return result

    def mex(self) -> int:
        """Return the smallest non-negative integer not stored.

        Correct only while every stored value occurs at most once.
        """
        node = self._root
        result = 0
        for i in self._levels():
            zero = node.children[0]
            if zero is None:
                return result
            if zero.count < (1 << i):
                node = zero
            else:
                result |= 1 << i
                one = node.children[1]
                if one is None:
                    return result
                node = one
        return result

    def minimum(self) -> int:
        """Return the smallest stored value."""
        self._require_values()
        node = self._root
        result = 0
        for i in self._levels():
            zero = node.children[0]
            if self._live(zero):
                node = zero
            else:
                result |= 1 << i
                node = node.children[1]
        return result


def max_xor_pair(values: Iterable[int]) -> int:
    """Return the largest XOR of two elements of ``values`` (an element may pair with itself)."""
    trie = BitTrie(DEFAULT_BITS)
    best = 0
    for value in values:
        trie.insert(value)
        best = max(best, trie.max_xor(value))
    return best