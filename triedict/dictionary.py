"""Word list with trie-backed lookups and bulk spell-checking."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from triedict.constants import is_valid_word
from triedict.trie import Trie

log = logging.getLogger("triedict")


class Dictionary:
    """In-memory dictionary, optionally seeded from a word-list file."""

    def __init__(self, words_path: str | None = None):
        self.trie = Trie()
        if words_path:
            self._load(words_path)

    def _load(self, words_path: str) -> None:
        """Insert one word per line; blank and non a-z lines are skipped."""
        added = skipped = 0
        with open(words_path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word:
                    continue
                if not is_valid_word(word):
                    skipped += 1
                    log.debug("Skipping %r: not a plain a-z word", word)
                    continue
                if self.trie.insert(word):
                    added += 1
        if skipped:
            log.debug("Skipped %d invalid lines in %s", skipped, words_path)
        log.info("Loaded %s words from %s", f"{added:,}", words_path)

    def add(self, word: str) -> bool:
        return self.trie.insert(word)

    def remove(self, word: str) -> bool:
        return self.trie.delete(word)

    def check_spelling(self, words: Iterable[str]) -> list[str]:
        """Every token not in the dictionary, in input order."""
        return [w for w in words if not self.trie.is_present(w)]

    def check_text(self, text: str) -> list[str]:
        return self.check_spelling(text.split())

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __iter__(self) -> Iterator[str]:
        return self.trie.enumerate()

    def __len__(self) -> int:
        return self.trie.count()
