"""Terminal commands for inspecting a word trie."""

from __future__ import annotations

from wordtrie.branch import MemberInfo
from wordtrie.storage import dump_to_file
from wordtrie.trie import Trie


def _print_members(members: list[MemberInfo]) -> None:
    if not members:
        print("No entries found.")
        return

    ranked = sorted(members, key=lambda m: (-m.count, m.value))
    width = max(len(m.value) for m in ranked)
    width = max(width, len("Entry"))
    print("=" * (width + 10))
    print(f" {'Count':>6}  {'Entry':<{width}}")
    print("-" * (width + 10))
    for m in ranked:
        print(f" {m.count:>6}  {m.value:<{width}}")
    print("=" * (width + 10))
    print(f"{len(ranked)} entries.")


def run_query(trie: Trie, words: list[str]) -> None:
    """Report entry and prefix status for each word."""
    for word in words:
        found, count = trie.has_count(word)
        is_prefix = trie.has_prefix(word)
        if found:
            print(f"  {word}: entry (count {count})")
        elif is_prefix:
            print(f"  {word}: prefix only")
        else:
            print(f"  {word}: not found")


def run_prefix(trie: Trie, prefix: str) -> None:
    _print_members(trie.prefix_members(prefix))


def run_members(trie: Trie) -> None:
    _print_members(trie.members())


def run_tree(trie: Trie) -> None:
    trie.print_dump()


def run_dump(trie: Trie, output: str) -> None:
    written = dump_to_file(trie, output)
    print(f"Wrote {written} entries to {output}.")
