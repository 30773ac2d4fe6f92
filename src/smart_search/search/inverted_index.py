"""In-memory inverted index mapping tokens to product ids."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable

from smart_search.search.analyzers import tokenize


class InvertedIndex:
    """Token -> posting set of document ids with AND-semantics lookup."""

    def __init__(self) -> None:
        self._postings: defaultdict[str, set[Hashable]] = defaultdict(set)

    def add_document(self, text: str | None, doc_id: Hashable) -> None:
        """Add ``doc_id`` to the posting set of every distinct token in ``text``."""
        for token in set(tokenize(text)):
            self._postings[token].add(doc_id)

    def search(self, query: str | None) -> set[Hashable]:
        """Return ids of documents containing every token of ``query``.

        A query without tokens, or with any token absent from the index,
        yields an empty set.
        """
        tokens = tokenize(query)
        if not tokens:
            return set()

        result: set[Hashable] | None = None
        for token in dict.fromkeys(tokens):
            documents = self._postings.get(token)
            if not documents:
                return set()
            if result is None:
                result = set(documents)
            else:
                result &= documents
            if not result:
                return set()
        return result or set()

    def postings(self, token: str) -> frozenset[Hashable]:
        return frozenset(self._postings.get(token.lower(), ()))

    def vocabulary(self) -> list[str]:
        return sorted(self._postings)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.lower() in self._postings

    def __len__(self) -> int:
        return len(self._postings)
