"""Word Trie -- counted prefix tree with thread-safe lookups."""

from wordtrie.branch import Branch, MemberInfo
from wordtrie.errors import TrieFileError
from wordtrie.locks import ReadWriteLock
from wordtrie.storage import dump_to_file, load_dump
from wordtrie.trie import Trie
from wordtrie.wordlist import find_wordlist, load_wordlist

__all__ = [
    "Branch",
    "MemberInfo",
    "ReadWriteLock",
    "Trie",
    "TrieFileError",
    "dump_to_file",
    "find_wordlist",
    "load_dump",
    "load_wordlist",
]
