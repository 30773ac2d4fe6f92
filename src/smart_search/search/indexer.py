"""Catalog indexing for keyword search and autocomplete.

A single batch pass tokenizes every product's text fields into the inverted
index and the prefix trie. The structures are rebuilt from scratch whenever
the catalog changes; there is no incremental update path.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging

from smart_search.domain.model import Product
from smart_search.search.analyzers import tokenize
from smart_search.search.inverted_index import InvertedIndex
from smart_search.search.trie import PrefixTrie


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexBuildResult:
    """Outcome of a catalog indexing run."""

    documents_indexed: int
    distinct_tokens: int


class CatalogIndexer:
    """Populate an inverted index and trie from catalog products."""

    def __init__(self, inverted_index: InvertedIndex, trie: PrefixTrie) -> None:
        self.inverted_index = inverted_index
        self.trie = trie

    def index_product(self, product: Product) -> None:
        for text in product.text_fields():
            self.inverted_index.add_document(text, product.id)
            for token in tokenize(text):
                self.trie.insert(token)

    def index_products(self, products: Iterable[Product]) -> IndexBuildResult:
        documents_indexed = 0
        for product in products:
            self.index_product(product)
            documents_indexed += 1

        result = IndexBuildResult(
            documents_indexed=documents_indexed,
            distinct_tokens=len(self.inverted_index),
        )
        logger.info(
            "Indexed %d products (%d distinct tokens)",
            result.documents_indexed,
            result.distinct_tokens,
        )
        return result
