"""Fuzzy matching for typo-tolerant search.

Edit distance plus the helpers the ranking engine builds on:

- ``levenshtein_distance``: case-insensitive edit distance
- ``similarity``: distance normalized into [0, 1] by the longer word
- ``find_fuzzy_matches``: words of a vocabulary within a distance bound
- ``fuzzy_prefix_match``: typo-tolerant prefix test used by suggestions
"""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(s1: str | None, s2: str | None, max_distance: int | None = None) -> int:
    """Return the Levenshtein (edit) distance between two strings.

    Both strings are lower-cased first, so ``"Hello"`` and ``"hello"`` are at
    distance 0; ``None`` counts as the empty string.

    Args:
        s1: First string.
        s2: Second string.
        max_distance: Optional bound. Once every cell of a DP row exceeds it
            the true distance must too, and ``max_distance + 1`` is returned
            straight away. Results within the bound are always exact.

    Returns:
        The minimum number of single-character insertions, deletions and
        substitutions turning ``s1`` into ``s2``.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "world")
        5
    """
    a = (s1 or "").lower()
    b = (s2 or "").lower()
    if len(a) > len(b):
        a, b = b, a
    if not a:
        return len(b)

    bounded = max_distance is not None
    if bounded and len(b) - len(a) > max_distance:
        return max_distance + 1

    # previous[i]: distance between a[:i] and the prefix of b consumed so far
    previous = list(range(len(a) + 1))
    for j, b_char in enumerate(b, start=1):
        current = [j]
        for i, a_char in enumerate(a, start=1):
            current.append(
                min(
                    previous[i] + 1,
                    current[i - 1] + 1,
                    previous[i - 1] + (a_char != b_char),
                )
            )
        if bounded and min(current) > max_distance:
            return max_distance + 1
        previous = current
    return previous[-1]


def similarity(token: str, word: str, distance: int) -> float:
    """Normalize an edit distance into a similarity score.

    ``1 - distance / max(len(token), len(word))``; two empty strings are
    identical and score 1.0.
    """
    longest = max(len(token), len(word))
    if longest == 0:
        return 1.0
    return 1.0 - distance / longest


def find_fuzzy_matches(term: str, vocabulary: Iterable[str], max_distance: int) -> list[tuple[str, int]]:
    """Return ``(word, distance)`` for each distinct vocabulary word near ``term``.

    Closest words come first; equal distances are ordered alphabetically.
    An empty ``term`` matches nothing.
    """
    if not term:
        return []

    distances: dict[str, int] = {}
    for word in vocabulary:
        if word not in distances:
            distances[word] = levenshtein_distance(term, word, max_distance)

    matches = [(word, distance) for word, distance in distances.items() if distance <= max_distance]
    matches.sort(key=lambda match: (match[1], match[0].lower()))
    return matches


def fuzzy_prefix_match(prefix: str, word: str, max_distance: int = 1) -> bool:
    """Return True when ``word`` starts with ``prefix`` up to ``max_distance`` edits.

    Only the leading ``len(prefix)`` characters of ``word`` are compared, and
    words shorter than the prefix never match.
    """
    if len(word) < len(prefix):
        return False
    return levenshtein_distance(prefix, word[: len(prefix)], max_distance) <= max_distance
