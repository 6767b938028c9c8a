"""Depth-first word enumeration over a trie.

Words come out in pre-order: the root first, then each child subtree in
the order the children were inserted.  That is the order a recursive DFS
would produce, which is lexicographic only when the words were inserted
in lexicographic order.

The walk uses an explicit stack of child iterators instead of recursion,
so very long words do not hit the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from chartrie.node import TrieNode


class TrieIterator:
    """Single-pass iterator over the words stored under ``root``."""

    def __init__(self, root: "TrieNode"):
        self.root = root
        self._started = False
        self._iters: list[Iterator["TrieNode"]] = []
        self._acc: list[str] = []

    def __iter__(self) -> TrieIterator:
        return self

    def __next__(self) -> str:
        if not self._started:
            self._started = True
            self._acc.append(self.root.key)
            self._iters.append(iter(self.root.children))
            if self.root.boundary:
                return self.root.key

        while self._iters:
            child = next(self._iters[-1], None)
            if child is None:
                # subtree exhausted, backtrack
                self._iters.pop()
                self._acc.pop()
                continue
            self._acc.append(child.key)
            self._iters.append(iter(child.children))
            if child.boundary:
                return "".join(self._acc)

        raise StopIteration
