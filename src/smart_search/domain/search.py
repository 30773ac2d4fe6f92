"""Domain models for search functionality.

Following Cosmic Python principles:
- Value Objects are immutable (frozen=True)
- Domain logic lives in domain layer
- No infrastructure dependencies

These models carry the analyzed query, the ranked results and the
diagnostic analytics record.
"""

from __future__ import annotations

from enum import Enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from smart_search.domain.model import Product


class QueryType(str, Enum):
    """Shape of a search query."""

    EMPTY = "EMPTY"
    SINGLE_KEYWORD = "SINGLE_KEYWORD"
    MULTI_KEYWORD = "MULTI_KEYWORD"
    EXACT_PHRASE = "EXACT_PHRASE"
    COMPLEX_QUERY = "COMPLEX_QUERY"


class QueryIntent(BaseModel):
    """Value object describing which search strategies a query should trigger."""

    model_config = ConfigDict(frozen=True)

    exact_phrase: bool = False
    has_keywords: bool = False
    allows_fuzzy_search: bool = False
    query_type: QueryType = QueryType.EMPTY
    phrase: str | None = None
    tokens: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def empty(cls) -> QueryIntent:
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {
            "queryType": self.query_type.value,
            "exactPhrase": self.exact_phrase,
            "hasKeywords": self.has_keywords,
            "allowsFuzzySearch": self.allows_fuzzy_search,
        }

    def __str__(self) -> str:
        return (
            f"QueryIntent{{type={self.query_type.value}, exactPhrase={self.exact_phrase}, "
            f"hasKeywords={self.has_keywords}, allowsFuzzy={self.allows_fuzzy_search}}}"
        )


EXACT_MATCH_THRESHOLD = 4.0
HIGH_RELEVANCE_THRESHOLD = 2.0
MEDIUM_RELEVANCE_THRESHOLD = 1.0


def match_type_for(score: float) -> str:
    """Label a relevance score."""
    if score >= EXACT_MATCH_THRESHOLD:
        return "Exact Match"
    if score >= HIGH_RELEVANCE_THRESHOLD:
        return "High Relevance"
    if score >= MEDIUM_RELEVANCE_THRESHOLD:
        return "Medium Relevance"
    return "Low Relevance"


def relevance_percentage_for(score: float) -> int:
    """Map a score onto 0-100 assuming a nominal maximum of 10.

    Scores are unbounded sums of independent passes, so anything at or
    above 10 clips to 100.
    """
    return max(0, min(100, math.floor(score * 10)))


class ScoredDocument(BaseModel):
    """Value object for a single ranked result.

    Combines the product reference with its accumulated relevance score.
    Match type and percentage are derived from the score.
    """

    model_config = ConfigDict(frozen=True)

    document: Product
    relevance_score: float = Field(ge=0.0)

    @property
    def match_type(self) -> str:
        return match_type_for(self.relevance_score)

    @property
    def relevance_percentage(self) -> int:
        return relevance_percentage_for(self.relevance_score)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the transport layer."""
        return {
            "document": self.document.model_dump(mode="json"),
            "relevanceScore": self.relevance_score,
            "matchType": self.match_type,
            "relevancePercentage": self.relevance_percentage,
        }

    def __str__(self) -> str:
        return f"[{self.relevance_score:.2f}] {self.document} ({self.match_type})"


class SearchAnalytics(BaseModel):
    """Diagnostic statistics for a single query."""

    model_config = ConfigDict(frozen=True)

    query_intent: QueryIntent
    keyword_matches: int = 0
    phrase_matches: int = 0
    fuzzy_matches: int = 0
    suggestions: int = 0

    @property
    def total_matches(self) -> int:
        return self.keyword_matches + self.phrase_matches + self.fuzzy_matches

    @property
    def search_strategy(self) -> str:
        intent = self.query_intent
        if intent.exact_phrase:
            return "Phrase-focused search"
        if intent.query_type is QueryType.SINGLE_KEYWORD:
            return "Single keyword + fuzzy search"
        if intent.has_keywords:
            return "Multi-algorithm hybrid search"
        return "Basic search"

    def performance_report(self) -> str:
        lines = [
            "=== Search Analytics Report ===",
            f"Query Intent: {self.query_intent}",
            f"Search Strategy: {self.search_strategy}",
            "Results:",
            f"  - Keyword matches: {self.keyword_matches}",
            f"  - Phrase matches: {self.phrase_matches}",
            f"  - Fuzzy matches: {self.fuzzy_matches}",
            f"  - Total matches: {self.total_matches}",
            f"  - Autocomplete suggestions: {self.suggestions}",
        ]
        return "\n".join(lines) + "\n"

    def to_dict(self) -> dict[str, Any]:
        return {
            "queryIntent": self.query_intent.to_dict(),
            "searchStrategy": self.search_strategy,
            "keywordMatches": self.keyword_matches,
            "phraseMatches": self.phrase_matches,
            "fuzzyMatches": self.fuzzy_matches,
            "totalMatches": self.total_matches,
            "suggestions": self.suggestions,
        }
