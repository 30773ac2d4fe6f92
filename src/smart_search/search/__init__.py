"""
Search indexing and query engine package.

This package provides a pure-Python, in-memory search stack:
- analyzers: Tokenization and stopword handling
- substring: Boyer-Moore substring search
- fuzzy: Levenshtein distance and fuzzy helpers
- inverted_index: Token -> product id postings
- trie: Prefix trie for autocomplete
- indexer: Catalog indexing
- query_analyzer: Query intent classification
- core: Unscored keyword/phrase/fuzzy/prefix lookups
- engine: Score fusion and ranking
"""
