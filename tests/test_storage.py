import pickle
from collections import Counter

import pytest

from wordtrie import Trie, TrieFileError, dump_to_file, load_dump


def _pairs(trie):
    return Counter((m.value, m.count) for m in trie.members())


@pytest.fixture
def trie():
    t = Trie()
    for word in ("cat", "cat", "car", "中国", "中国人民"):
        t.add(word)
    return t


def test_dump_then_load_restores_counts(tmp_path, trie):
    path = tmp_path / "trie.dump"
    assert dump_to_file(trie, path) == 4
    restored = load_dump(path)
    assert _pairs(restored) == _pairs(trie)
    assert restored.has_count("cat") == (True, 2)


def test_dump_payload_is_value_count_pairs(tmp_path, trie):
    path = tmp_path / "trie.dump"
    dump_to_file(trie, path)
    with open(path, "rb") as f:
        entries = pickle.load(f)
    assert sorted(entries) == sorted([("cat", 2), ("car", 1), ("中国", 1), ("中国人民", 1)])


def test_load_dump_merges_into_existing_trie(tmp_path, trie):
    path = tmp_path / "trie.dump"
    dump_to_file(trie, path)
    target = Trie()
    target.add("cat")
    assert load_dump(path, target) is target
    assert target.has_count("cat") == (True, 3)


def test_empty_trie_round_trips(tmp_path):
    path = tmp_path / "empty.dump"
    assert dump_to_file(Trie(), path) == 0
    assert load_dump(path).members() == []


def test_dump_to_unwritable_path(tmp_path, trie):
    path = tmp_path / "missing-dir" / "trie.dump"
    with pytest.raises(TrieFileError, match="Could not write dump file") as info:
        dump_to_file(trie, path)
    assert isinstance(info.value.__cause__, OSError)


def test_load_missing_dump(tmp_path):
    with pytest.raises(TrieFileError, match="Could not read dump file"):
        load_dump(tmp_path / "nope.dump")


@pytest.mark.parametrize("payload", [b"", b"not a pickle", pickle.dumps([("cat", 1)])[:-3]])
def test_load_corrupt_dump(tmp_path, payload):
    path = tmp_path / "bad.dump"
    path.write_bytes(payload)
    with pytest.raises(TrieFileError, match="Malformed dump file"):
        load_dump(path)


@pytest.mark.parametrize("entries", [
    {"cat": 1},
    [("cat",)],
    [("cat", 0)],
    [(1, 2)],
    [("ok", 1), ["list", 1]],
    [("x", True)],
])
def test_load_rejects_unexpected_payload(tmp_path, entries):
    path = tmp_path / "odd.dump"
    path.write_bytes(pickle.dumps(entries))
    target = Trie()
    with pytest.raises(TrieFileError, match="Malformed dump file"):
        load_dump(path, target)
    assert target.members() == []
