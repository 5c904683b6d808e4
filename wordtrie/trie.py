"""Prefix trie for word insertion and prefix completion."""

from __future__ import annotations

from collections.abc import Iterator


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        # Insertion-ordered; traversal order follows it.
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie answering "which stored words start with this?".

    Children are visited in the order their characters were first
    inserted, so ``search`` results are deterministic: a word always
    precedes its extensions, and sibling branches appear oldest first.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        """Add *word*. Inserting ``""`` marks the root itself as a word."""
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def search(self, prefix: str) -> list[str]:
        """Return every stored word that starts with (or equals) *prefix*.

        The exact prefix comes first when it is itself a word, followed by
        its descendants in depth-first pre-order.
        """
        node = self._walk(prefix)
        if node is None:
            return []
        return self._collect(node, prefix)

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(start: TrieNode, prefix: str) -> list[str]:
        results: list[str] = []
        stack: list[tuple[str, TrieNode]] = [(prefix, start)]
        while stack:
            text, node = stack.pop()
            if node.is_terminal:
                results.append(text)
            # Pushed reversed so the first-inserted child is popped first.
            for ch, child in reversed(node.children.items()):
                stack.append((text + ch, child))
        return results

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return iter(self.search(""))
