"""Command-line demo: build a trie, edit it and print it."""

from __future__ import annotations

import argparse
import logging

from chartrie.constants import DEMO_SEED, DEMO_WORDS, MIN_WORD_LENGTH
from chartrie.node import TrieNode
from chartrie.trie import Trie
from chartrie.wordlist import load_trie

log = logging.getLogger("chartrie")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chartrie",
        description="Build a character trie from a word and print its structure",
    )
    parser.add_argument("word", nargs="?", default=None,
                        help=f"Seed word for the trie (default: {DEMO_SEED!r} plus demo words)")
    parser.add_argument("--insert", "-i", action="append", default=[], metavar="WORD",
                        help="Insert a word (repeatable)")
    parser.add_argument("--remove", "-r", action="append", default=[], metavar="WORD",
                        help="Remove a word (repeatable)")
    parser.add_argument("--query", "-q", action="append", default=[], metavar="PREFIX",
                        help="Report whether PREFIX is a stored word or prefix (repeatable)")
    parser.add_argument("--dict", type=str, default=None, metavar="PATH",
                        help="Load a word list file instead of seeding from WORD")
    parser.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                        help="Skip shorter words when loading a word list")
    parser.add_argument("--tree", action="store_true",
                        help="Print an indented tree instead of the debug form")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def build_trie(args: argparse.Namespace) -> TrieNode | Trie:
    """Seed node (or loaded word list) with ``--insert`` and ``--remove`` applied."""
    if args.dict:
        trie: TrieNode | Trie = load_trie(args.dict, args.min_length)
        inserts = list(args.insert)
    elif args.word:
        trie = TrieNode.from_word(args.word)
        inserts = list(args.insert)
    else:
        trie = TrieNode.from_word(DEMO_SEED)
        inserts = DEMO_WORDS + list(args.insert)

    for word in inserts:
        result = trie.insert(word)
        if result is None:
            log.warning("Skipping %r: does not start with %r", word, trie.key)
        elif not result:
            log.info("%r already present", word)

    for word in args.remove:
        if not trie.remove(word):
            log.info("%r not present", word)
    return trie


def run_cli(trie: TrieNode | Trie, queries: list[str], tree: bool = False) -> None:
    """Print the trie, its words and the answers to ``queries``."""
    print(trie.pretty() if tree else repr(trie))
    print()

    words = list(trie)
    print(f"Words ({len(words)}):")
    for word in words:
        print(f"  {word}")
    print(f"Nodes: {trie.compute_size()}")

    for prefix in queries:
        node = trie.get(prefix)
        if node is None:
            status = "absent"
        elif node.boundary:
            status = "word"
        else:
            status = "prefix"
        print(f"{prefix}: {status}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if any(not w for w in [*args.insert, *args.remove, *args.query]) or args.word == "":
        parser.error("words and prefixes must not be empty")

    run_cli(build_trie(args), args.query, tree=args.tree)


if __name__ == "__main__":
    main()
