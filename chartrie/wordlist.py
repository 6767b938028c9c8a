"""Word list files loaded into a Trie."""

from __future__ import annotations

import logging
import os

from chartrie.constants import DEFAULT_WORD_PATHS, MIN_WORD_LENGTH
from chartrie.trie import Trie

log = logging.getLogger("chartrie.wordlist")


def load_words(path: str, min_length: int = MIN_WORD_LENGTH) -> list[str]:
    """Read one word per line from a UTF-8 file.

    Blank lines, ``#`` comments and words shorter than ``min_length`` are
    skipped.  Words are kept exactly as written apart from surrounding
    whitespace.
    """
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            if len(word) >= max(min_length, 1):
                words.append(word)
    return words


def load_trie(path: str | None = None, min_length: int = MIN_WORD_LENGTH) -> Trie:
    """Build a Trie from the first usable word list.

    ``path`` is tried first, then each of ``DEFAULT_WORD_PATHS``.  Returns an
    empty Trie when none of them exists or holds any word.
    """
    search_paths: list[str] = []
    if path:
        search_paths.append(path)
    search_paths.extend(DEFAULT_WORD_PATHS)

    for candidate in search_paths:
        if not os.path.exists(candidate):
            log.debug("No word list at %s", candidate)
            continue
        trie = Trie(load_words(candidate, min_length))
        if trie:
            log.info("Loaded %s words from %s", f"{len(trie):,}", candidate)
            return trie

    log.warning("No word list found -- starting with an empty trie.")
    return Trie()
