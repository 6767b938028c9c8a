"""chartrie: character-keyed prefix tree."""

from chartrie.constants import DEFAULT_WORD_PATHS, MIN_WORD_LENGTH
from chartrie.iterator import TrieIterator
from chartrie.node import EmptyWordError, TrieNode
from chartrie.trie import Trie
from chartrie.wordlist import load_trie, load_words

__all__ = [
    "DEFAULT_WORD_PATHS",
    "MIN_WORD_LENGTH",
    "EmptyWordError",
    "Trie",
    "TrieIterator",
    "TrieNode",
    "load_trie",
    "load_words",
]
