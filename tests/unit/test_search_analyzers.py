"""Unit tests for tokenization and stopword handling."""

import pytest

from smart_search.search.analyzers import (
    DEFAULT_STOPWORDS,
    iter_tokens,
    stopword_set,
    tokenize,
    without_stopwords,
)


@pytest.mark.unit
class TestTokenize:
    def test_lowercases_and_splits(self):
        assert tokenize("Apple smartphone, with GREAT camera!") == ["apple", "smartphone", "with", "great", "camera"]

    def test_splits_on_any_non_word_run(self):
        assert tokenize("wi-fi//usb-c...ok") == ["wi", "fi", "usb", "c", "ok"]

    def test_underscore_and_digits_are_word_characters(self):
        assert tokenize("ultra_edition S23") == ["ultra_edition", "s23"]

    def test_discards_empty_tokens(self):
        assert tokenize('  "great camera"  ') == ["great", "camera"]
        assert tokenize("!!! ???") == []

    def test_none_and_empty(self):
        assert tokenize(None) == []
        assert tokenize("") == []

    def test_unicode_words(self):
        assert tokenize("Смартфон Apple") == ["смартфон", "apple"]

    def test_keeps_duplicates_and_order(self):
        assert tokenize("pro Pro PRO max") == ["pro", "pro", "pro", "max"]

    def test_iter_tokens_is_lazy(self):
        tokens = iter_tokens("iPhone 14")
        assert next(tokens) == "iphone"
        assert list(tokens) == ["14"]


@pytest.mark.unit
class TestStopwords:
    def test_default_list_is_bilingual(self):
        stopwords = stopword_set()

        assert stopwords == frozenset(DEFAULT_STOPWORDS)
        assert {"the", "with", "для", "про"} <= stopwords

    def test_custom_list_is_lowercased(self):
        assert stopword_set(["The", "PHONE"]) == frozenset({"the", "phone"})

    def test_empty_custom_list(self):
        assert stopword_set([]) == frozenset()

    def test_without_stopwords(self):
        tokens = tokenize("case for the phone и чехол для телефона")
        assert without_stopwords(tokens, stopword_set()) == ["case", "phone", "чехол", "телефона"]
