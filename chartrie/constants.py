"""Defaults for word list loading and the demo driver."""

from __future__ import annotations

import os

# Words shorter than this are skipped when loading a word list
MIN_WORD_LENGTH = 1

# Searched in order when no word list path is given
DEFAULT_WORD_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

# Demo trie: seeded from one word, then extended
DEMO_SEED = "hello😁world"
DEMO_WORDS: list[str] = ["hella", "hello😁man!"]
