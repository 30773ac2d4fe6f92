"""Unit tests for Boyer-Moore substring search."""

import pytest

from smart_search.search.substring import NOT_FOUND, contains, find_first


@pytest.mark.unit
class TestFindFirst:
    def test_finds_word(self):
        assert find_first("hello world", "world") == 6

    def test_match_at_start(self):
        assert find_first("hello world", "hello") == 0

    @pytest.mark.parametrize("text", ["", "abc", "hello world"])
    def test_empty_needle_matches_at_zero(self, text):
        assert find_first(text, "") == 0

    def test_needle_longer_than_haystack(self):
        assert find_first("hi", "hello") == NOT_FOUND

    def test_empty_haystack(self):
        assert find_first("", "a") == NOT_FOUND
        assert find_first(None, "a") == NOT_FOUND

    def test_not_found(self):
        assert find_first("hello world", "xyz") == NOT_FOUND

    def test_returns_leftmost_occurrence(self):
        assert find_first("abcabcabc", "abc") == 0
        assert find_first("xxabcabc", "abc") == 2

    def test_overlapping_patterns(self):
        assert find_first("aaaaab", "aab") == 3
        assert find_first("abababc", "ababc") == 2

    def test_repeated_last_character(self):
        assert find_first("xaabaa", "baa") == 3

    @pytest.mark.parametrize(
        ("haystack", "needle"),
        [
            ("apple smartphone with great camera", "great camera"),
            ("mississippi", "issip"),
            ("mississippi", "ppi"),
            ("abracadabra", "cad"),
            ("the quick brown fox", "o"),
            ("aaaa", "aaaaa"),
            ("noise cancellation", "cancel"),
        ],
    )
    def test_agrees_with_str_find(self, haystack, needle):
        assert find_first(haystack, needle) == haystack.find(needle)


@pytest.mark.unit
class TestContains:
    def test_contains(self):
        assert contains("apple smartphone", "smart")
        assert not contains("apple smartphone", "android")
