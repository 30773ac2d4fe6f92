"""Unit tests for the prefix trie."""

import pytest

from smart_search.search.trie import PrefixTrie


@pytest.fixture
def trie():
    t = PrefixTrie()
    for word in ["apple", "application", "app", "banana", "band", "bandana"]:
        t.insert(word)
    return t


@pytest.mark.unit
class TestPrefixTrie:
    def test_autocomplete_prefix(self, trie):
        assert trie.autocomplete("app") == ["app", "apple", "application"]
        assert trie.autocomplete("ban") == ["banana", "band", "bandana"]

    def test_prefix_diverging_token_is_excluded(self):
        t = PrefixTrie()
        t.insert("apple")
        t.insert("application")
        assert t.autocomplete("apple") == ["apple"]

    def test_missing_prefix(self, trie):
        assert trie.autocomplete("xyz") == []
        assert trie.autocomplete("applz") == []

    def test_empty_prefix_returns_everything(self, trie):
        assert trie.autocomplete("") == ["app", "apple", "application", "banana", "band", "bandana"]

    def test_empty_trie(self):
        assert PrefixTrie().autocomplete("") == []

    def test_membership_requires_terminal_node(self, trie):
        assert "apple" in trie
        assert "appl" not in trie
        assert "" not in trie

    def test_duplicate_insert_counts_once(self):
        t = PrefixTrie()
        t.insert("camera")
        t.insert("camera")
        t.insert("")
        assert len(t) == 1
        assert t.autocomplete("cam") == ["camera"]

    def test_deep_tokens(self):
        t = PrefixTrie()
        word = "a" * 5000
        t.insert(word)
        assert t.autocomplete("aaa") == [word]

    def test_unicode_tokens(self):
        t = PrefixTrie()
        t.insert("смартфон")
        t.insert("смарт")
        assert t.autocomplete("смар") == ["смарт", "смартфон"]
