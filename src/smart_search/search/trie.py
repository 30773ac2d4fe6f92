"""Prefix trie for autocomplete.

Nodes live in a flat arena; each node maps a character to the arena index of
its child. Index 0 is always the root.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, int] = field(default_factory=dict)
    terminal: bool = False


class PrefixTrie:
    """Arena-backed trie of previously inserted tokens."""

    def __init__(self) -> None:
        self._nodes: list[_TrieNode] = [_TrieNode()]
        self._size = 0

    def insert(self, token: str) -> None:
        """Insert ``token``; empty tokens are ignored."""
        if not token:
            return
        current = 0
        for char in token:
            child = self._nodes[current].children.get(char)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(_TrieNode())
                self._nodes[current].children[char] = child
            current = child
        node = self._nodes[current]
        if not node.terminal:
            node.terminal = True
            self._size += 1

    def autocomplete(self, prefix: str) -> list[str]:
        """Return every inserted token starting with ``prefix``.

        Tokens come back in lexicographic order (edges are walked in sorted
        key order). An empty prefix returns every token; an unknown prefix
        returns an empty list.
        """
        start = self._find(prefix)
        if start is None:
            return []

        results: list[str] = []
        # Explicit stack keeps deep tokens clear of the recursion limit
        stack: list[tuple[int, str]] = [(start, prefix)]
        while stack:
            index, text = stack.pop()
            node = self._nodes[index]
            if node.terminal:
                results.append(text)
            for char in sorted(node.children, reverse=True):
                stack.append((node.children[char], text + char))
        return results

    def _find(self, prefix: str) -> int | None:
        current = 0
        for char in prefix:
            child = self._nodes[current].children.get(char)
            if child is None:
                return None
            current = child
        return current

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str) or not token:
            return False
        index = self._find(token)
        return index is not None and self._nodes[index].terminal

    def __len__(self) -> int:
        return self._size
