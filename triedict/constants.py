"""Alphabet and program constants."""

from __future__ import annotations

import string

PROGRAM_NAME = "triedict"

# Only the 26 lowercase Latin letters are stored; slot i holds ALPHABET[i].
ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)


def letter_to_index(ch: str) -> int:
    """Child slot for a lowercase letter ('a' -> 0 ... 'z' -> 25)."""
    index = ord(ch) - ord("a") if len(ch) == 1 else -1
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"not a lowercase letter: {ch!r}")
    return index


def index_to_letter(index: int) -> str:
    """Letter for a child slot (0 -> 'a' ... 25 -> 'z')."""
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"letter index out of range: {index}")
    return ALPHABET[index]


def is_valid_word(word: str) -> bool:
    """True if ``word`` is non-empty and only contains a-z (after lowercasing)."""
    return bool(word) and word.isascii() and all(ch in ALPHABET for ch in word.lower())
