"""Smart search engine: multi-strategy retrieval with additive score fusion.

Each query is analyzed into an intent, then a small set of independent
scoring passes runs against the catalog:

- phrase: quoted phrase contained in name or description
- keyword: inverted-index AND lookup, weighted by which fields hold each token
- fuzzy: per-token best edit-distance similarity against name/description words
- exact: whole query contained in name, description or category (always on)

Every pass adds into one score accumulator keyed by product id. Scores are
plain sums and are not normalized, so a product matched by several passes
can score well above the nominal 0-10 range used for percentages.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from smart_search.catalog import Catalog
from smart_search.config import RankingConfig
from smart_search.domain.model import Product
from smart_search.domain.search import QueryIntent, ScoredDocument, SearchAnalytics
from smart_search.search.analyzers import tokenize
from smart_search.search.core import SearchCore
from smart_search.search.fuzzy import find_fuzzy_matches, fuzzy_prefix_match, similarity
from smart_search.search.indexer import CatalogIndexer
from smart_search.search.inverted_index import InvertedIndex
from smart_search.search.query_analyzer import QueryAnalyzer
from smart_search.search.trie import PrefixTrie


logger = logging.getLogger(__name__)

ScoreMap = dict[int, float]

NAME_KEYWORD_WEIGHT = 2.0
DESCRIPTION_KEYWORD_WEIGHT = 1.0
CATEGORY_KEYWORD_WEIGHT = 0.5
MULTI_MATCH_BONUS = 0.2
NAME_FUZZY_WEIGHT = 2.0


def _accumulate(scores: ScoreMap, product_id: int, score: float) -> None:
    scores[product_id] = scores.get(product_id, 0.0) + score


def keyword_relevance(tokens: Sequence[str], product: Product) -> float:
    """Field-weighted keyword score for one product.

    Every (token, field) hit counts towards the multi-match bonus, so a token
    found in both name and description counts twice.
    """
    name = product.name.lower()
    description = product.description.lower()
    category = product.category.lower()

    relevance = 0.0
    matched = 0
    for token in tokens:
        if token in name:
            relevance += NAME_KEYWORD_WEIGHT
            matched += 1
        if token in description:
            relevance += DESCRIPTION_KEYWORD_WEIGHT
            matched += 1
        if token in category:
            relevance += CATEGORY_KEYWORD_WEIGHT
            matched += 1

    if matched > 1:
        relevance *= 1.0 + MULTI_MATCH_BONUS * matched
    return relevance


def fuzzy_relevance(tokens: Sequence[str], product: Product, max_distance: int) -> float | None:
    """Sum of per-token best similarities, or None when nothing was within reach.

    Name words weigh twice as much as description words.
    """
    name_words = tokenize(product.name)
    description_words = tokenize(product.description)

    total = 0.0
    found = False
    for token in tokens:
        best = 0.0
        for words, weight in ((name_words, NAME_FUZZY_WEIGHT), (description_words, 1.0)):
            for word, distance in find_fuzzy_matches(token, words, max_distance):
                found = True
                best = max(best, similarity(token, word, distance) * weight)
        total += best
    return total if found else None


def exact_match_score(query: str, product: Product, boost: float) -> float:
    needle = query.lower()
    score = 0.0
    if needle in product.name.lower():
        score += boost * 2
    if needle in product.description.lower():
        score += boost
    if needle in product.category.lower():
        score += boost * 0.5
    return score


class SmartSearchEngine:
    """Combine keyword, phrase, fuzzy and exact matching into ranked results."""

    def __init__(
        self,
        inverted_index: InvertedIndex,
        trie: PrefixTrie,
        catalog: Catalog,
        config: RankingConfig | None = None,
    ) -> None:
        self.inverted_index = inverted_index
        self.trie = trie
        self.catalog = catalog
        self.config = config or RankingConfig()
        self.search_core = SearchCore(inverted_index, trie, catalog)
        self.query_analyzer = QueryAnalyzer(self.config.stopwords)

    def smart_search(self, query: str | None) -> list[ScoredDocument]:
        """Rank catalog products against ``query``.

        Results are sorted by descending score, ties broken by ascending
        product id, and capped at ``config.max_results``.
        """
        if query is None or not query.strip():
            return []

        intent = self.query_analyzer.analyze_query(query)
        scores: ScoreMap = {}

        if intent.exact_phrase:
            self._add_phrase_results(intent, scores)
        if intent.has_keywords:
            self._add_keyword_results(query, intent, scores)
        if intent.allows_fuzzy_search:
            self._add_fuzzy_results(intent, scores)
        self._add_exact_match_results(query.strip(), scores)

        ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
        results = []
        for product_id, score in ranked[: self.config.max_results]:
            product = self.catalog.get_product_by_id(product_id)
            if product is not None:
                results.append(ScoredDocument(document=product, relevance_score=score))

        logger.debug("Query %r (%s) ranked %d products", query, intent.query_type.value, len(results))
        return results

    def get_search_suggestions(self, prefix: str | None) -> list[str]:
        """Autocomplete ``prefix``: trie completions first, then typo-tolerant prefixes."""
        if prefix is None or not prefix.strip():
            return []

        normalized = prefix.strip().lower()
        suggestions = self.search_core.autocomplete(normalized)
        if len(suggestions) < self.config.suggestion_fuzzy_threshold:
            suggestions.extend(self._fuzzy_autocomplete_suggestions(normalized))

        return list(dict.fromkeys(suggestions))[: self.config.max_suggestions]

    def get_search_analytics(self, query: str | None) -> SearchAnalytics:
        """Report how each strategy would respond to ``query``."""
        intent = self.query_analyzer.analyze_query(query)
        if query is None or not query.strip():
            return SearchAnalytics(query_intent=intent)

        phrase = intent.phrase or query.strip()
        return SearchAnalytics(
            query_intent=intent,
            keyword_matches=len(self.search_core.search(query)),
            phrase_matches=len(self.search_core.search_phrase(phrase)),
            fuzzy_matches=len(self.search_core.fuzzy_search(query, self.config.max_fuzzy_distance)),
            suggestions=len(self.get_search_suggestions(query)),
        )

    def _add_phrase_results(self, intent: QueryIntent, scores: ScoreMap) -> None:
        for product in self.search_core.search_phrase(intent.phrase):
            _accumulate(scores, product.id, self.config.phrase_match_boost)

    def _add_keyword_results(self, query: str, intent: QueryIntent, scores: ScoreMap) -> None:
        for product in self.search_core.search(query):
            score = keyword_relevance(intent.tokens, product) * self.config.keyword_weight
            _accumulate(scores, product.id, score)

    def _add_fuzzy_results(self, intent: QueryIntent, scores: ScoreMap) -> None:
        if not intent.tokens:
            return
        for product in self.catalog:
            relevance = fuzzy_relevance(intent.tokens, product, self.config.max_fuzzy_distance)
            if relevance is not None:
                _accumulate(scores, product.id, relevance * self.config.fuzzy_match_penalty)

    def _add_exact_match_results(self, query: str, scores: ScoreMap) -> None:
        for product in self.catalog:
            score = exact_match_score(query, product, self.config.exact_match_boost)
            if score > 0:
                _accumulate(scores, product.id, score)

    def _fuzzy_autocomplete_suggestions(self, prefix: str) -> list[str]:
        seen: dict[str, None] = {}
        for product in self.catalog:
            for word in tokenize(product.searchable_text()):
                if word not in seen and fuzzy_prefix_match(prefix, word, self.config.suggestion_fuzzy_distance):
                    seen[word] = None
        return list(seen)


def build_search_engine(products: Iterable[Product], config: RankingConfig | None = None) -> SmartSearchEngine:
    """Index ``products`` and return a ready engine."""
    catalog = Catalog(products)
    inverted_index = InvertedIndex()
    trie = PrefixTrie()
    CatalogIndexer(inverted_index, trie).index_products(catalog)
    return SmartSearchEngine(inverted_index, trie, catalog, config)
