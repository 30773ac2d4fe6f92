"""Boyer-Moore substring search (bad-character heuristic).

Used by the phrase pass to check exact phrase containment in product fields.
"""

from __future__ import annotations


NOT_FOUND = -1


def _bad_character_table(needle: str) -> dict[str, int]:
    """Distance from the needle end to the last occurrence of each character.

    The final character is excluded so a shift is never zero.
    """
    last = len(needle) - 1
    return {char: last - idx for idx, char in enumerate(needle[:-1])}


def find_first(haystack: str | None, needle: str | None) -> int:
    """Return the index of the leftmost occurrence of ``needle`` in ``haystack``.

    An empty needle matches at index 0. Returns ``NOT_FOUND`` when the needle
    does not occur.

    >>> find_first("hello world", "world")
    6
    >>> find_first("hi", "hello")
    -1
    """
    if not needle:
        return 0
    if not haystack or len(needle) > len(haystack):
        return NOT_FOUND

    shifts = _bad_character_table(needle)
    m = len(needle)
    limit = len(haystack) - m

    i = 0
    while i <= limit:
        j = m - 1
        while j >= 0 and haystack[i + j] == needle[j]:
            j -= 1

        if j < 0:
            return i

        shift = shifts.get(haystack[i + j], m)
        i += max(1, shift - (m - 1 - j))

    return NOT_FOUND


def contains(haystack: str | None, needle: str | None) -> bool:
    """Return True when ``needle`` occurs in ``haystack``."""
    return find_first(haystack, needle) != NOT_FOUND
