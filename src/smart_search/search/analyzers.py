"""Text analysis shared by indexing and querying.

Text is split into maximal runs of Unicode word characters and lower-cased.
The inverted index, the trie and the query analyzer all go through
``tokenize`` so a token produced at build time is always reachable at query
time.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import re


WORD_PATTERN = re.compile(r"\w+")

# Russian and English articles/prepositions/conjunctions
DEFAULT_STOPWORDS: tuple[str, ...] = (
    "и", "в", "на", "с", "для", "от", "до", "по", "за", "из", "к", "о", "об", "про",
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
)  # fmt: skip


def iter_tokens(text: str | None) -> Iterator[str]:
    """Yield lower-cased word tokens of ``text`` in order, duplicates included."""
    if not text:
        return
    for match in WORD_PATTERN.finditer(text):
        yield match.group(0).lower()


def tokenize(text: str | None) -> list[str]:
    """Return the lower-cased word tokens of ``text``.

    >>> tokenize("iPhone 14, Pro-Max!")
    ['iphone', '14', 'pro', 'max']
    """
    return list(iter_tokens(text))


def stopword_set(words: Iterable[str] | None = None) -> frozenset[str]:
    """Lower-cased stopword set; ``None`` selects ``DEFAULT_STOPWORDS``."""
    return frozenset(word.lower() for word in (DEFAULT_STOPWORDS if words is None else words))


def without_stopwords(tokens: Iterable[str], stopwords: frozenset[str]) -> list[str]:
    return [token for token in tokens if token not in stopwords]
