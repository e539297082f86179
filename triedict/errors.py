"""Exceptions raised by triedict."""

from __future__ import annotations


class InvalidWordError(ValueError):
    """Raised when a word is empty or contains characters outside a-z."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"invalid word {word!r}: only letters a-z are allowed")
