"""wordtrie -- trie-backed word autocompletion."""

from wordtrie.constants import MAX_SUGGESTIONS
from wordtrie.trie import Trie, TrieNode
from wordtrie.dictionary import Dictionary
from wordtrie.session import CompletionSession, last_token

__version__ = "0.1.0"

__all__ = [
    "MAX_SUGGESTIONS",
    "CompletionSession",
    "Dictionary",
    "Trie",
    "TrieNode",
    "last_token",
]
