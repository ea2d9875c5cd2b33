#!/usr/bin/env python3
"""
Word Trie Engine

Loads a plain-text word list (and/or a binary dump) into a counted
prefix trie and answers membership, frequency and prefix queries
from the terminal.

Usage:
    python wordtrie_engine.py --words words.txt prefix auto
    python wordtrie_engine.py --words words.txt dump words.dump
    python wordtrie_engine.py --load-dump words.dump query cat dog
"""

from __future__ import annotations

import argparse
import logging

from wordtrie.cli import run_dump, run_members, run_prefix, run_query, run_tree
from wordtrie.constants import LOGGER_NAME
from wordtrie.errors import TrieFileError
from wordtrie.storage import load_dump
from wordtrie.trie import Trie
from wordtrie.wordlist import find_wordlist, load_wordlist


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Word Trie Engine -- counted prefix lookups over a word list",
    )
    parser.add_argument("--words", dest="wordlist", type=str, default=None,
                        help="Path to a newline-delimited word list")
    parser.add_argument("--load-dump", type=str, default=None,
                        help="Path to a binary dump written by the 'dump' command")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")

    sub = parser.add_subparsers(dest="command", required=True)
    query = sub.add_parser("query", help="Check whether words are stored entries or prefixes")
    query.add_argument("entries", nargs="+")
    prefix = sub.add_parser("prefix", help="List entries starting with a prefix")
    prefix.add_argument("prefix")
    sub.add_parser("members", help="List every entry with its count")
    sub.add_parser("tree", help="Print the trie structure (debug)")
    dump = sub.add_parser("dump", help="Write all entries to a binary dump file")
    dump.add_argument("output")
    return parser


def build_trie(words: str | None, dump_path: str | None) -> Trie:
    """Trie from an optional dump plus an explicit or discovered word list."""
    trie = Trie()
    if dump_path:
        load_dump(dump_path, trie)

    if words:
        load_wordlist(words, trie)
    elif not dump_path:
        found = find_wordlist()
        if found:
            load_wordlist(found, trie)
        else:
            log.warning("No word list found -- starting with an empty trie.")
    return trie


# Entry point

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        trie = build_trie(args.wordlist, args.load_dump)

        if args.command == "query":
            run_query(trie, args.entries)
        elif args.command == "prefix":
            run_prefix(trie, args.prefix)
        elif args.command == "members":
            run_members(trie)
        elif args.command == "tree":
            run_tree(trie)
        elif args.command == "dump":
            run_dump(trie, args.output)
    except TrieFileError as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
