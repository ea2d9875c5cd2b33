"""Errors raised by the word-list and dump collaborators."""

from __future__ import annotations

import os


class TrieFileError(RuntimeError):
    """A word list or dump file could not be read, written or decoded."""

    def __init__(self, message: str, path: str | os.PathLike | None = None):
        super().__init__(message)
        self.path = path
