"""Counted prefix trie for membership, frequency and prefix lookups."""

from __future__ import annotations

from wordtrie.branch import Branch, MemberInfo
from wordtrie.locks import ReadWriteLock


class Trie:
    """Multiset of strings stored as a prefix tree.

    ``add`` and ``delete`` hold ``lock`` exclusively for the whole walk;
    every query holds it shared, so readers never see a half-applied
    insertion or deletion.
    """

    def __init__(self):
        self.root = Branch()
        self.lock = ReadWriteLock()

    # mutation

    def add(self, entry: str, count: int = 1) -> Branch:
        """Add ``entry`` (``count`` times) and return its terminal branch.

        The empty string is accepted and counts against the root itself.
        """
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        with self.lock.write_locked():
            return self.root.add(entry, count)

    def delete(self, entry: str) -> bool:
        """Drop one occurrence of ``entry``.

        Returns whether the entry existed before the call, not whether it
        is gone now.
        """
        if not entry:
            return False
        with self.lock.write_locked():
            return self.root.delete(entry)

    # lookup

    def get_branch(self, entry: str) -> Branch | None:
        with self.lock.read_locked():
            return self.root.get_branch(entry)

    def has(self, entry: str) -> bool:
        with self.lock.read_locked():
            return self.root.has(entry)

    def has_count(self, entry: str) -> tuple[bool, int]:
        with self.lock.read_locked():
            return self.root.has_count(entry)

    def has_prefix(self, prefix: str) -> bool:
        with self.lock.read_locked():
            return self.root.has_prefix(prefix)

    def has_prefix_count(self, prefix: str) -> tuple[bool, int]:
        """Prefix existence plus the prefix node's own count (not a subtree sum)."""
        with self.lock.read_locked():
            return self.root.has_prefix_count(prefix)

    # enumeration

    def members(self) -> list[MemberInfo]:
        with self.lock.read_locked():
            return self.root.members()

    def members_list(self) -> list[str]:
        return [m.value for m in self.members()]

    def prefix_members(self, prefix: str) -> list[MemberInfo]:
        with self.lock.read_locked():
            return self.root.prefix_members("", prefix)

    def prefix_members_list(self, prefix: str) -> list[str]:
        return [m.value for m in self.prefix_members(prefix)]

    def node_count(self) -> int:
        with self.lock.read_locked():
            return self.root.node_count()

    # debugging

    def dump(self) -> str:
        with self.lock.read_locked():
            return self.root.dump()

    def print_dump(self) -> None:
        print(self.dump())

    def __contains__(self, entry: str) -> bool:
        return self.has(entry)

    def __len__(self) -> int:
        return len(self.members())
