"""Typing session that turns raw input into live suggestions."""

from __future__ import annotations

import logging
import re

from wordtrie.constants import TOKEN_SEPARATOR
from wordtrie.dictionary import Dictionary

log = logging.getLogger("wordtrie")

_SEPARATOR = re.compile(TOKEN_SEPARATOR)


def last_token(text: str) -> str:
    """The in-progress word: whatever follows the last whitespace run.

    >>> last_token("hello wor")
    'wor'
    >>> last_token("hello ")
    ''
    """
    return _SEPARATOR.split(text)[-1]


class CompletionSession:
    """Tracks the word being typed and its suggestions.

    ``update`` is called on every input change, ``commit`` when the user
    adds the in-progress word to the dictionary.
    """

    def __init__(self, dictionary: Dictionary | None = None):
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self.word = ""
        self.suggestions: list[str] = []

    def update(self, text: str) -> list[str]:
        self.word = last_token(text)
        self.suggestions = self.dictionary.search(self.word) if self.word else []
        return self.suggestions

    def commit(self) -> list[str]:
        word = self.word
        self.dictionary.insert(word)
        log.debug("Added %r to the dictionary", word)
        self.suggestions = self.dictionary.search(word)
        self.word = ""
        return self.suggestions

    def commit_text(self, text: str) -> list[str]:
        self.update(text)
        return self.commit()
