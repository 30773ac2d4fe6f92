"""Unscored catalog lookups shared by ranking and analytics."""

from __future__ import annotations

from smart_search.catalog import Catalog
from smart_search.domain.model import Product
from smart_search.search.analyzers import tokenize
from smart_search.search.fuzzy import find_fuzzy_matches
from smart_search.search.inverted_index import InvertedIndex
from smart_search.search.substring import contains
from smart_search.search.trie import PrefixTrie


class SearchCore:
    """Keyword, phrase, fuzzy and prefix lookups over one catalog."""

    def __init__(self, inverted_index: InvertedIndex, trie: PrefixTrie, catalog: Catalog) -> None:
        self.inverted_index = inverted_index
        self.trie = trie
        self.catalog = catalog

    def search(self, query: str | None) -> list[Product]:
        """Products containing every query token, ordered by id."""
        product_ids = self.inverted_index.search(query)
        products = (self.catalog.get_product_by_id(pid) for pid in sorted(product_ids))
        return [product for product in products if product is not None]

    def search_phrase(self, phrase: str | None) -> list[Product]:
        """Products whose name or description contains ``phrase`` (case-insensitive)."""
        if not phrase:
            return []
        needle = phrase.lower()
        return [
            product
            for product in self.catalog
            if contains(product.name.lower(), needle) or contains(product.description.lower(), needle)
        ]

    def fuzzy_search(self, query: str | None, max_distance: int) -> list[Product]:
        """Products with a name or description word near any query token."""
        query_tokens = tokenize(query)
        if not query_tokens:
            return []

        results: list[Product] = []
        for product in self.catalog:
            words = tokenize(product.name) + tokenize(product.description)
            if any(find_fuzzy_matches(token, words, max_distance) for token in query_tokens):
                results.append(product)
        return results

    def autocomplete(self, prefix: str | None) -> list[str]:
        return self.trie.autocomplete((prefix or "").lower())
