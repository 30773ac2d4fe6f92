"""Query intent analysis.

Classifies a raw query into the set of search strategies worth running.
Pure and stateless apart from the configured stopword set.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import re

from smart_search.domain.search import QueryIntent, QueryType
from smart_search.search.analyzers import stopword_set, tokenize, without_stopwords


QUOTED_PHRASE = re.compile(r'"([^"]+)"')

MIN_KEYWORD_LENGTH = 3
MIN_TYPO_CHECK_LENGTH = 4
MAX_FUZZY_TOKENS = 2
MAX_MULTI_KEYWORD_TOKENS = 3


class QueryAnalyzer:
    """Derive a ``QueryIntent`` from raw query text."""

    def __init__(self, stopwords: Iterable[str] | None = None) -> None:
        self.stopwords = stopword_set(stopwords)

    def analyze_query(self, query: str | None) -> QueryIntent:
        if query is None or not query.strip():
            return QueryIntent.empty()

        tokens = tokenize(query.strip())
        phrase_match = QUOTED_PHRASE.search(query)
        exact_phrase = phrase_match is not None

        return QueryIntent(
            exact_phrase=exact_phrase,
            has_keywords=self._has_valid_keywords(tokens),
            allows_fuzzy_search=self._should_use_fuzzy_search(tokens),
            query_type=self._determine_query_type(tokens, exact_phrase),
            phrase=phrase_match.group(1) if phrase_match else None,
            tokens=tuple(tokens),
        )

    def _has_valid_keywords(self, tokens: Sequence[str]) -> bool:
        return any(len(token) >= MIN_KEYWORD_LENGTH for token in without_stopwords(tokens, self.stopwords))

    def _should_use_fuzzy_search(self, tokens: Sequence[str]) -> bool:
        # Short queries are cheap to fuzz and most likely to be typed fast
        if len(tokens) <= MAX_FUZZY_TOKENS:
            return True
        return any(len(token) >= MIN_TYPO_CHECK_LENGTH and has_repeated_chars(token) for token in tokens)

    @staticmethod
    def _determine_query_type(tokens: Sequence[str], exact_phrase: bool) -> QueryType:
        if exact_phrase:
            return QueryType.EXACT_PHRASE
        if not tokens:
            return QueryType.EMPTY
        if len(tokens) == 1:
            return QueryType.SINGLE_KEYWORD
        if len(tokens) <= MAX_MULTI_KEYWORD_TOKENS:
            return QueryType.MULTI_KEYWORD
        return QueryType.COMPLEX_QUERY


def has_repeated_chars(word: str) -> bool:
    """True when ``word`` has two identical adjacent characters (typo signal)."""
    return any(a == b for a, b in zip(word, word[1:]))
