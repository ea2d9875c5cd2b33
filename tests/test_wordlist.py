import logging

import pytest

from wordtrie import Trie, TrieFileError, find_wordlist, load_wordlist
from wordtrie import wordlist


def test_load_strips_terminators_and_counts_duplicates(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes("cat\ncat\r\ndog\n\n中国\nlast".encode("utf-8"))
    trie = load_wordlist(path)
    assert trie.has_count("cat") == (True, 2)
    assert trie.has("dog")
    assert trie.has("中国")
    assert trie.has("last")
    assert not trie.has_prefix("cat\n")
    assert not trie.has("")
    assert len(trie) == 4


def test_load_keeps_inner_whitespace_and_case(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(" New York\nnew york\n", encoding="utf-8")
    trie = load_wordlist(path)
    assert set(trie.members_list()) == {" New York", "new york"}


def test_load_into_existing_trie(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\n", encoding="utf-8")
    trie = Trie()
    trie.add("apple")
    assert load_wordlist(path, trie) is trie
    assert trie.has_count("apple") == (True, 2)


def test_load_logs_word_count(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("a\nb\nc\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="wordtrie"):
        load_wordlist(path)
    assert "Adding 3 words to index" in caplog.text


def test_missing_file_raises_trie_file_error(tmp_path):
    path = tmp_path / "nope.txt"
    with pytest.raises(TrieFileError) as info:
        load_wordlist(path)
    assert info.value.path == path
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_undecodable_file_raises_trie_file_error(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\xfe\xfa\n")
    with pytest.raises(TrieFileError, match="Could not read word list"):
        load_wordlist(path)


def test_find_wordlist_prefers_explicit_path(tmp_path, monkeypatch):
    explicit = tmp_path / "mine.txt"
    explicit.write_text("x\n", encoding="utf-8")
    monkeypatch.setattr(wordlist, "DEFAULT_WORDLISTS", [])
    assert find_wordlist(str(explicit)) == str(explicit)


def test_find_wordlist_falls_back_to_defaults(tmp_path, monkeypatch):
    fallback = tmp_path / "words.txt"
    fallback.write_text("x\n", encoding="utf-8")
    monkeypatch.setattr(wordlist, "DEFAULT_WORDLISTS", [str(tmp_path / "missing.txt"), str(fallback)])
    assert find_wordlist(str(tmp_path / "also-missing.txt")) == str(fallback)


def test_find_wordlist_none(tmp_path, monkeypatch):
    monkeypatch.setattr(wordlist, "DEFAULT_WORDLISTS", [str(tmp_path / "missing.txt")])
    assert find_wordlist() is None


def test_bad_bytes_late_in_file_leave_trie_untouched(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"".join(f"word{i}\n".encode("utf-8") for i in range(20000)) + b"\xff\xfe\n")
    trie = Trie()
    trie.add("keep")
    with pytest.raises(TrieFileError):
        load_wordlist(path, trie)
    assert trie.members_list() == ["keep"]
    assert trie.node_count() == len("keep") + 1
