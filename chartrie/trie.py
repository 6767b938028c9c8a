"""Word set backed by one TrieNode per first character."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from chartrie.node import TrieNode, _require_word

log = logging.getLogger("chartrie")


class Trie:
    """Set of words with prefix search.

    A bare :class:`TrieNode` can never be empty and only holds words that
    start with its own key.  This container routes each word to the root
    for its first character, creating roots as needed, and drops a root
    once removals leave it with no children and no word of its own.
    """

    def __init__(self, words: Iterable[Sequence[str]] | None = None):
        self.roots: list[TrieNode] = []
        self._count = 0
        if words is not None:
            for word in words:
                self.insert(word)

    def _root_for(self, ch: str) -> TrieNode | None:
        for root in self.roots:
            if root.key == ch:
                return root
        return None

    def insert(self, word: Sequence[str]) -> bool:
        """Add ``word``; True if it was not already present."""
        _require_word(word, "insert")
        root = self._root_for(word[0])
        if root is None:
            log.debug("New root %r", word[0])
            self.roots.append(TrieNode.from_word(word))
            added = True
        else:
            added = bool(root.insert(word))
        if added:
            self._count += 1
        return added

    def remove(self, word: Sequence[str]) -> bool:
        """Remove ``word``; True if it was present."""
        _require_word(word, "remove")
        root = self._root_for(word[0])
        if root is None or not root.remove(word):
            return False
        self._count -= 1
        if not root.children and not root.boundary:
            log.debug("Dropping empty root %r", root.key)
            self.roots.remove(root)
        return True

    def get(self, prefix: Sequence[str]) -> TrieNode | None:
        """Node at the end of ``prefix``, or None."""
        _require_word(prefix, "get")
        root = self._root_for(prefix[0])
        return root.get(prefix) if root is not None else None

    def contains(self, word: Sequence[str]) -> bool:
        node = self.get(word)
        return node is not None and node.boundary

    def has_prefix(self, prefix: Sequence[str]) -> bool:
        return self.get(prefix) is not None

    def words_with_prefix(self, prefix: Sequence[str]) -> list[str]:
        """All stored words starting with ``prefix``, in trie order."""
        node = self.get(prefix)
        if node is None:
            return []
        head = "".join(prefix[:-1])
        return [head + word for word in node]

    def compute_size(self) -> int:
        """Total node count across all roots."""
        return sum(root.compute_size() for root in self.roots)

    def __contains__(self, word: Sequence[str]) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        for root in self.roots:
            yield from root

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return bool(self.roots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return self.roots == other.roots

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Trie({self.roots!r})"

    def pretty(self) -> str:
        return "\n".join(root.pretty() for root in self.roots)
