import pytest

from emojilookup.emoji import Emoji
from emojilookup.trie import (
    EmptySequenceError,
    NodeNotFound,
    Trie,
    TrieBuildError,
    TrieError,
    TrieFrozenError,
    build,
)


@pytest.fixture
def trie():
    trie = Trie()
    trie.insert([0x1F600])
    trie.insert([0x1F1FA, 0x1F1F8])
    trie.insert("\U0001F468\u200d\U0001F4BB")
    return trie


class TestInsert:
    def test_insert__creates_path_and_marks_end(self, trie):
        node = trie.child(trie.root, 0x1F1FA)
        assert trie.is_terminal(node) is False
        node = trie.child(node, 0x1F1F8)
        assert trie.is_terminal(node) is True

    def test_insert__root_is_never_terminal(self, trie):
        assert trie.is_terminal(trie.root) is False

    def test_insert__string_and_code_points_are_equivalent(self):
        trie = Trie()
        trie.insert("\U0001F1FA\U0001F1F8")
        assert trie.contains([0x1F1FA, 0x1F1F8])

    def test_insert__shared_prefix_reuses_nodes(self):
        trie = Trie()
        trie.insert([0x1F1FA, 0x1F1F8])
        before = trie.node_count
        trie.insert([0x1F1FA, 0x1F1E6])
        assert trie.node_count == before + 1

    def test_insert__duplicate_does_not_grow(self, trie):
        count = len(trie)
        nodes = trie.node_count
        trie.insert([0x1F600])
        assert len(trie) == count
        assert trie.node_count == nodes

    def test_insert__counts_sequences(self, trie):
        assert len(trie) == 3

    def test_insert__empty_sequence__raises(self):
        with pytest.raises(EmptySequenceError):
            Trie().insert([])

    def test_insert__empty_string__raises(self):
        with pytest.raises(ValueError):
            Trie().insert("")

    def test_insert__out_of_range_code_point__raises(self):
        with pytest.raises(TrieError):
            Trie().insert([0x110000])

    def test_insert__negative_code_point__raises(self):
        with pytest.raises(TrieError):
            Trie().insert([-1])

    def test_insert__frozen__raises(self, trie):
        trie.freeze()
        with pytest.raises(TrieFrozenError):
            trie.insert([0x1F604])
        assert not trie.contains([0x1F604])


class TestQueries:
    def test_has_child__present(self, trie):
        assert trie.has_child(trie.root, 0x1F600) is True

    def test_has_child__absent(self, trie):
        assert trie.has_child(trie.root, ord("a")) is False

    def test_child__absent__raises_not_found(self, trie):
        with pytest.raises(NodeNotFound):
            trie.child(trie.root, ord("a"))

    def test_child__not_found_is_a_key_error(self, trie):
        with pytest.raises(KeyError):
            trie.child(trie.root, 0x1F1F8)

    def test_contains__exact_sequence(self, trie):
        assert trie.contains("\U0001F468\u200d\U0001F4BB") is True

    def test_contains__prefix_only(self, trie):
        assert trie.contains("\U0001F468\u200d") is False

    def test_contains__empty(self, trie):
        assert trie.contains("") is False

    def test_longest_match__prefers_longer_sequence(self):
        trie = Trie()
        trie.insert("\U0001F468")
        trie.insert("\U0001F468\u200d\U0001F4BB")
        assert trie.longest_match("\U0001F468\u200d\U0001F4BBabc") == 3

    def test_longest_match__falls_back_to_shorter_sequence(self):
        trie = Trie()
        trie.insert("\U0001F468")
        trie.insert("\U0001F468\u200d\U0001F4BB")
        assert trie.longest_match("\U0001F468\u200dx") == 1

    def test_longest_match__from_offset(self, trie):
        assert trie.longest_match("ab\U0001F600", start=2) == 1

    def test_longest_match__no_match(self, trie):
        assert trie.longest_match("abc") == 0


class TestBuild:
    def test_build__returns_frozen_trie(self):
        trie = build([Emoji(unicode="\U0001F600")])
        assert trie.frozen is True
        assert trie.contains("\U0001F600")

    def test_build__empty_record__raises(self):
        with pytest.raises(TrieBuildError):
            build([Emoji(unicode="\U0001F600"), Emoji(unicode="")])

    def test_build__no_records__raises(self):
        with pytest.raises(TrieBuildError):
            build([])

    def test_build__inserts_every_record(self, small_records):
        trie = build(small_records)
        assert len(trie) == 2
        for record in small_records:
            assert trie.contains(record.code_points)
