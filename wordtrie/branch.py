"""Trie branch nodes and the traversal algorithms that run over them.

A ``Branch`` knows nothing about locking; callers (``wordtrie.trie.Trie``)
are responsible for guarding access when a tree is shared between threads.
Paths are plain ``str`` objects, so iterating a path yields code points.
"""

from __future__ import annotations

from wordtrie.constants import DUMP_INDENT, ROOT_LABEL


class MemberInfo:
    """A stored entry and its occurrence count at query time."""

    __slots__ = ("value", "count")

    def __init__(self, value: str, count: int):
        self.value = value
        self.count = count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemberInfo):
            return NotImplemented
        return self.value == other.value and self.count == other.count

    def __repr__(self) -> str:
        return f"MemberInfo({self.value!r}, {self.count})"


class Branch:
    """Single node in the trie.

    ``count`` is how many times the path ending here was added (minus
    deletions).  A node with ``count == 0`` only exists because it lies on
    the path to some longer entry.
    """

    __slots__ = ("children", "count")

    def __init__(self):
        self.children: dict[str, Branch] = {}
        self.count: int = 0

    # mutation

    def add(self, path: str, count: int = 1) -> Branch:
        """Create any missing nodes along ``path`` and bump the terminal count."""
        node = self
        for ch in path:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = Branch()
            node = child
        node.count += count
        return node

    def delete(self, path: str) -> bool:
        """Remove one occurrence of ``path``.

        Returns True if the entry existed before the call, even when its
        count was only decremented.  Once a node is left without a count
        and without children it is unlinked, and so is every ancestor that
        ends up in the same state.  ``self`` is never unlinked.
        """
        node = self
        trail: list[tuple[Branch, str]] = []
        for ch in path:
            child = node.children.get(ch)
            if child is None:
                return False
            trail.append((node, ch))
            node = child

        if node.count == 0:
            return False
        node.count -= 1

        while trail and node.count == 0 and not node.children:
            parent, ch = trail.pop()
            del parent.children[ch]
            node = parent
        return True

    # lookup

    def get_branch(self, path: str) -> Branch | None:
        """Node at the end of ``path``, or None."""
        node = self
        for ch in path:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def has(self, path: str) -> bool:
        return self.has_count(path)[0]

    def has_count(self, path: str) -> tuple[bool, int]:
        """``(True, count)`` if ``path`` is a stored entry, else ``(False, 0)``."""
        node = self.get_branch(path)
        if node is None or node.count == 0:
            return False, 0
        return True, node.count

    def has_prefix(self, path: str) -> bool:
        return self.get_branch(path) is not None

    def has_prefix_count(self, path: str) -> tuple[bool, int]:
        """Whether any node exists at ``path``, plus that node's own count."""
        node = self.get_branch(path)
        if node is None:
            return False, 0
        return True, node.count

    # enumeration

    def members(self, prefix: str = "") -> list[MemberInfo]:
        """Every entry in this subtree, each value starting with ``prefix``.

        Order is unspecified.
        """
        found: list[MemberInfo] = []
        stack: list[tuple[str, Branch]] = [(prefix, self)]
        while stack:
            value, node = stack.pop()
            if node.count > 0:
                found.append(MemberInfo(value, node.count))
            for ch, child in node.children.items():
                stack.append((value + ch, child))
        return found

    def prefix_members(self, accumulated: str, remaining: str) -> list[MemberInfo]:
        """Entries below the node reached by ``remaining``.

        ``accumulated`` is the prefix already consumed on the way to this
        node; returned values carry ``accumulated + remaining`` in front.
        An unknown prefix yields an empty list.
        """
        node = self.get_branch(remaining)
        if node is None:
            return []
        return node.members(accumulated + remaining)

    def node_count(self) -> int:
        """Number of nodes in this subtree, this one included."""
        total = 0
        stack: list[Branch] = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children.values())
        return total

    # debugging

    def dump(self, indent_level: int = 0, label: str = ROOT_LABEL) -> str:
        """Indented tree rendering, one ``<char> (<count>)`` line per node."""
        lines: list[str] = []
        stack: list[tuple[int, str, Branch]] = [(indent_level, label, self)]
        while stack:
            depth, key, node = stack.pop()
            shown = key if key.isprintable() else repr(key)
            lines.append(f"{DUMP_INDENT * depth}{shown} ({node.count})")
            # reversed so children pop off the stack in sorted order
            for ch in sorted(node.children, reverse=True):
                stack.append((depth + 1, ch, node.children[ch]))
        return "\n".join(lines)

    def print_dump(self) -> None:
        print(self.dump())

    def __repr__(self) -> str:
        return f"Branch(count={self.count}, children={''.join(self.children)!r})"
