"""Configuration constants for wordtrie."""

from __future__ import annotations

import os

LOGGER_NAME = "wordtrie"

# Word lists tried in order when no explicit path is given.
DEFAULT_WORDLISTS: list[str] = [
    "words.txt",
    "wordlist.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

PICKLE_PROTOCOL = 4

DUMP_INDENT = "  "
ROOT_LABEL = "<root>"
