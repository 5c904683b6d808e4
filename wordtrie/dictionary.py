"""Session dictionary: a trie seeded from word lists and guarded by a lock."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable, Iterator

from wordtrie.trie import Trie

log = logging.getLogger("wordtrie")


class Dictionary:
    """In-memory word store with prefix completion.

    Every call holds ``self.lock``, so one dictionary can be shared
    between threads even though the underlying :class:`Trie` is not
    synchronised.
    """

    def __init__(self, paths: str | os.PathLike | Iterable[str] | None = None):
        self.trie = Trie()
        self.lock = threading.Lock()
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        self._load(list(paths or []))

    def _load(self, paths: list[str]) -> None:
        if not paths:
            log.debug("No word lists given -- starting with an empty dictionary.")
            return

        for path in paths:
            if not os.path.exists(path):
                log.warning("Word list not found: %s", path)
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    words = [word for line in f for word in line.split()]
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read word list %s: %s", path, exc)
                continue
            added = self.add_words(words)
            log.info("Loaded %s words from %s", f"{added:,}", path)

    def insert(self, word: str) -> None:
        with self.lock:
            self.trie.insert(word)

    def add_words(self, words: Iterable[str]) -> int:
        """Insert many words at once. Returns how many were new."""
        with self.lock:
            before = len(self.trie)
            for word in words:
                self.trie.insert(word)
            return len(self.trie) - before

    def search(self, prefix: str) -> list[str]:
        with self.lock:
            return self.trie.search(prefix)

    def __contains__(self, word: str) -> bool:
        with self.lock:
            return word in self.trie

    def __len__(self) -> int:
        with self.lock:
            return len(self.trie)

    def __iter__(self) -> Iterator[str]:
        return iter(self.search(""))
