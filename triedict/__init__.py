"""triedict -- trie-backed dictionary and spell checker."""

__version__ = "1.0.0"

from triedict.constants import ALPHABET, ALPHABET_SIZE, index_to_letter, letter_to_index
from triedict.errors import InvalidWordError
from triedict.trie import Prune, Trie, TrieNode
from triedict.dictionary import Dictionary

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "Dictionary",
    "InvalidWordError",
    "Prune",
    "Trie",
    "TrieNode",
    "index_to_letter",
    "letter_to_index",
]
