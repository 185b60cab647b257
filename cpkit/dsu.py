"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements ``0..n``; ``components`` counts sets among ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self.components = n

    def _check(self, a: int) -> None:
        if not 0 <= a < len(self.parent):
            raise IndexError(f"element {a} is out of range")

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        self._check(a)
        root = a
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[a] != root:
            self.parent[a], a = root, self.parent[a]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return False if they were already joined."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return False
        if self._size[x] < self._size[y]:
            x, y = y, x
        self.parent[y] = x
        self._size[x] += self._size[y]
        self.components -= 1
        return True

    def size_of(self, a: int) -> int:
        """Return the number of elements in the set holding ``a``."""
        return self._size[self.find(a)]