"""Trie node: a character-keyed prefix tree over Unicode scalar values."""

from __future__ import annotations

from typing import Sequence

from chartrie.iterator import TrieIterator


class EmptyWordError(ValueError):
    """Raised when an operation that needs at least one character gets none."""


def _require_word(word: Sequence[str], op: str) -> None:
    """Reject empty words and items that are not a single codepoint."""
    if len(word) == 0:
        raise EmptyWordError(f"{op} can't be called with an empty word")
    if isinstance(word, str):
        return
    for ch in word:
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"{op} needs single characters, got {ch!r}")


class TrieNode:
    """One node of the trie.

    Every node holds a single character ``key``, a ``boundary`` flag that is
    True when the path from the root down to this node spells a stored word,
    and an ordered list of ``children``.  Children are kept in insertion
    order and looked up with a linear scan; sibling keys are unique.

    A node is also the root of its own subtrie, so every operation here can
    be called on any node, as long as the word passed in starts with that
    node's key.  Words are strings or sequences of single codepoints.
    """

    __slots__ = ("key", "boundary", "children")

    def __init__(
        self,
        key: str,
        boundary: bool = False,
        children: list[TrieNode] | None = None,
    ):
        self.key = key
        self.boundary = boundary
        self.children: list[TrieNode] = children if children is not None else []

    # construction

    @classmethod
    def empty(cls, key: str) -> TrieNode:
        """Single boundary node with no children (a one-character word)."""
        return cls(key, boundary=True)

    @classmethod
    def from_word(cls, word: Sequence[str]) -> TrieNode:
        """Build a root-to-leaf chain spelling ``word``.

        Only the last node is a boundary.  Raises :class:`EmptyWordError`
        for an empty word.
        """
        _require_word(word, "from_word")
        leaf = cls.empty(word[-1])
        for ch in reversed(word[:-1]):
            leaf = cls(ch, children=[leaf])
        return leaf

    def first_char(self) -> str:
        return self.key

    # queries

    def compute_size(self) -> int:
        """Number of nodes (stored characters) in this subtrie."""
        size = 0
        stack: list[TrieNode] = [self]
        while stack:
            node = stack.pop()
            size += 1
            stack.extend(node.children)
        return size

    def find_child(self, ch: str) -> TrieNode | None:
        """Direct child keyed ``ch``, or None."""
        for child in self.children:
            if child.key == ch:
                return child
        return None

    def get(self, prefix: Sequence[str]) -> TrieNode | None:
        """Node reached by following ``prefix`` from here.

        ``prefix[0]`` must be this node's key.  The node is returned whatever
        its boundary flag is; check ``.boundary`` to tell a stored word from
        a bare prefix.  Returns None when the path does not exist.
        """
        _require_word(prefix, "get")
        return self._walk(prefix)

    def get_mut(self, prefix: Sequence[str]) -> TrieNode | None:
        """Same traversal as :meth:`get`, for editing the subtrie in place.

        The returned node is the live node inside this trie.  Changing its
        ``key`` to one already used by a sibling breaks the unique-sibling
        invariant; nothing re-checks it afterwards.
        """
        _require_word(prefix, "get_mut")
        return self._walk(prefix)

    def _walk(self, prefix: Sequence[str]) -> TrieNode | None:
        if prefix[0] != self.key:
            return None
        node: TrieNode | None = self
        for i in range(1, len(prefix)):
            node = node.find_child(prefix[i])
            if node is None:
                return None
        return node

    def contains(self, word: Sequence[str]) -> bool:
        """True if ``word`` is stored as a complete word."""
        node = self.get(word)
        return node is not None and node.boundary

    def has_prefix(self, prefix: Sequence[str]) -> bool:
        """True if some stored path starts with ``prefix``."""
        return self.get(prefix) is not None

    def __contains__(self, word: Sequence[str]) -> bool:
        return self.contains(word)

    # mutation

    def insert(self, word: Sequence[str]) -> bool | None:
        """Add ``word`` below this node.

        Returns True if the word is new, False if it was already stored, and
        None on a key mismatch (``word[0]`` is not this node's key), in which
        case nothing changes.
        """
        _require_word(word, "insert")
        if word[0] != self.key:
            return None

        node = self
        for i in range(1, len(word)):
            child = node.find_child(word[i])
            if child is None:
                node.children.append(TrieNode.from_word(word[i:]))
                return True
            node = child

        if node.boundary:
            return False
        node.boundary = True
        return True

    def remove(self, word: Sequence[str]) -> bool:
        """Unmark ``word`` and prune the branch that only it was using.

        Returns True iff something changed.  A node that other words still
        pass through keeps existing with its boundary cleared.  The root
        itself is never removed: taking out the last word leaves a childless,
        non-boundary root behind.
        """
        _require_word(word, "remove")
        if word[0] != self.key:
            return False

        path: list[TrieNode] = [self]
        for i in range(1, len(word)):
            child = path[-1].find_child(word[i])
            if child is None:
                return False
            path.append(child)

        target = path[-1]
        if not target.boundary:
            return False
        target.boundary = False

        # prune upwards until a node is still used by another word
        while len(path) > 1:
            node = path.pop()
            if node.children or node.boundary:
                break
            parent = path[-1]
            for pos, child in enumerate(parent.children):
                if child is node:
                    del parent.children[pos]
                    break
        return True

    # iteration / debug form

    def iter(self) -> TrieIterator:
        """Fresh depth-first enumeration of the words in this subtrie."""
        return TrieIterator(self)

    def __iter__(self) -> TrieIterator:
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        stack: list[tuple[TrieNode, TrieNode]] = [(self, other)]
        while stack:
            a, b = stack.pop()
            if (
                a.key != b.key
                or a.boundary != b.boundary
                or len(a.children) != len(b.children)
            ):
                return False
            stack.extend(zip(a.children, b.children))
        return True

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        # built bottom-up so deep chains don't recurse
        done: dict[int, str] = {}
        stack: list[tuple[TrieNode, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if node.children and not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children)
                continue
            if node.children:
                inner = ", ".join(done.pop(id(child)) for child in node.children)
                done[id(node)] = (
                    f"TrieNode({node.key!r}, boundary={node.boundary}, "
                    f"children=[{inner}])"
                )
            else:
                done[id(node)] = f"TrieNode({node.key!r}, boundary={node.boundary})"
        return done[id(self)]

    def pretty(self, indent: int = 0) -> str:
        """One node per line, nested by depth; boundary nodes end in ``*``."""
        lines: list[str] = []
        stack: list[tuple[TrieNode, int]] = [(self, indent)]
        while stack:
            node, depth = stack.pop()
            mark = "*" if node.boundary else ""
            lines.append(f"{'  ' * depth}{node.key}{mark}")
            for child in reversed(node.children):
                stack.append((child, depth + 1))
        return "\n".join(lines)
