"""Prefix tree of words with multiplicities and prefix counts."""

from __future__ import annotations

from typing import Optional


class _Node:
    __slots__ = ("children", "passing", "ending")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.passing = 0
        self.ending = 0


class Trie:
    """Multiset of strings supporting exact and prefix counts."""

    def __init__(self) -> None:
        self._root = _Node()

    def __len__(self) -> int:
        return self._root.passing

    def _walk(self, text: str) -> Optional[_Node]:
        node = self._root
        for ch in text:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        node.passing += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.passing += 1
        node.ending += 1

    def count(self, word: str) -> int:
        """Return how many times ``word`` is stored."""
        node = self._walk(word)
        return 0 if node is None else node.ending

    def count_prefix(self, prefix: str) -> int:
        """Return how many stored words start with ``prefix``."""
        node = self._walk(prefix)
        return 0 if node is None else node.passing

    def remove(self, word: str) -> bool:
        """Remove one occurrence of ``word``; return False if it was not stored."""
        if self.count(word) == 0:
            return False
        node = self._root
        node.passing -= 1
        for ch in word:
            child = node.children[ch]
            child.passing -= 1
            if child.passing == 0:
                del node.children[ch]
                return True
            node = child
        node.ending -= 1
        return True

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.count(word) > 0