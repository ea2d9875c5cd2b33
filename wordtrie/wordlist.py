"""Plain-text word list loading."""

from __future__ import annotations

import logging
import os
import time

from wordtrie.constants import DEFAULT_WORDLISTS, LOGGER_NAME
from wordtrie.errors import TrieFileError
from wordtrie.trie import Trie

log = logging.getLogger(LOGGER_NAME)


def find_wordlist(path: str | None = None) -> str | None:
    """First existing file among ``path`` and the default locations."""
    search_paths: list[str] = []
    if path:
        search_paths.append(path)
    search_paths.extend(DEFAULT_WORDLISTS)

    for candidate in search_paths:
        if os.path.isfile(candidate):
            log.debug("Using word list %s", candidate)
            return candidate
    return None


def load_wordlist(path: str | os.PathLike, trie: Trie | None = None) -> Trie:
    """Add every line of a UTF-8 word list to ``trie`` (a new one by default).

    Line terminators are stripped and blank lines skipped; nothing else is
    normalized.  Repeated lines raise the entry's count.  The whole file is
    read before anything is added, so a file that fails to decode leaves
    ``trie`` untouched.
    """
    if trie is None:
        trie = Trie()

    t0 = time.time()
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as exc:
        raise TrieFileError(f"Could not read word list {path}: {exc}", path) from exc

    added = 0
    for word in words:
        if word:
            trie.add(word)
            added += 1

    log.info("Adding %s words to index took %.3fs", f"{added:,}", time.time() - t0)
    return trie
