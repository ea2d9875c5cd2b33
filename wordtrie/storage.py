"""Binary dump of a trie's entries.

A dump is a pickled ``list[tuple[str, int]]`` of ``(value, count)`` pairs.
``load_dump`` is the exact inverse of ``dump_to_file``; it has nothing to
do with the plain-text word lists read by ``wordtrie.wordlist``.

Only load dumps from trusted sources: unpickling can execute code.
"""

from __future__ import annotations

import logging
import os
import pickle

from wordtrie.constants import LOGGER_NAME, PICKLE_PROTOCOL
from wordtrie.errors import TrieFileError
from wordtrie.trie import Trie

log = logging.getLogger(LOGGER_NAME)


def dump_to_file(trie: Trie, path: str | os.PathLike) -> int:
    """Write all entries of ``trie`` to ``path``; returns the entry count.

    The entries are a consistent snapshot taken under the trie's lock.
    """
    entries = [(m.value, m.count) for m in trie.members()]

    try:
        payload = pickle.dumps(entries, protocol=PICKLE_PROTOCOL)
    except pickle.PicklingError as exc:
        raise TrieFileError(f"Could not encode trie entries for dump file: {exc}", path) from exc

    try:
        with open(path, "wb") as f:
            f.write(payload)
    except OSError as exc:
        raise TrieFileError(f"Could not write dump file {path}: {exc}", path) from exc

    log.info("Wrote %d entries (%d bytes) to dump file %s", len(entries), len(payload), path)
    return len(entries)


def load_dump(path: str | os.PathLike, trie: Trie | None = None) -> Trie:
    """Restore the entries written by ``dump_to_file`` into ``trie``.

    The whole file is validated before anything is added, so a malformed
    dump leaves ``trie`` untouched.
    """
    try:
        with open(path, "rb") as f:
            entries = pickle.load(f)
    except OSError as exc:
        raise TrieFileError(f"Could not read dump file {path}: {exc}", path) from exc
    except (pickle.UnpicklingError, EOFError, AttributeError, ImportError, IndexError,
            TypeError, ValueError) as exc:
        raise TrieFileError(f"Malformed dump file {path}: {exc}", path) from exc

    if not isinstance(entries, list):
        raise TrieFileError(f"Malformed dump file {path}: expected a list of entries", path)
    for item in entries:
        if not (
            isinstance(item, tuple)
            and len(item) == 2
            and isinstance(item[0], str)
            and isinstance(item[1], int)
            and not isinstance(item[1], bool)
            and item[1] > 0
        ):
            raise TrieFileError(f"Malformed dump file {path}: bad entry {item!r}", path)

    if trie is None:
        trie = Trie()
    for value, count in entries:
        trie.add(value, count)

    log.info("Loaded %d entries from dump file %s", len(entries), path)
    return trie
