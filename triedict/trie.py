"""Prefix trie over the 26 lowercase letters."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator

from triedict.constants import ALPHABET, ALPHABET_SIZE, is_valid_word, letter_to_index
from triedict.errors import InvalidWordError

log = logging.getLogger("triedict.trie")


class TrieNode:
    """Single node in the trie. Edges, not nodes, carry the letters."""

    __slots__ = ("children", "terminal", "out_degree")

    def __init__(self, terminal: bool = False):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.terminal: bool = terminal
        self.out_degree: int = 0  # number of non-None children


class Prune(enum.Enum):
    """What a node asks of its parent after a delete step."""

    KEEP = "keep"
    UNLINK = "unlink"


class Trie:
    """Case-insensitive word store with one 26-way node per prefix.

    Only a-z are accepted. ``insert`` raises :class:`InvalidWordError` for
    anything else; lookups and deletes of such words simply report ``False``.
    """

    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str) -> bool:
        """Add ``word``. Returns False if it was already stored."""
        if not is_valid_word(word):
            raise InvalidWordError(word)
        s = word.lower()

        node = self.root
        for ch in s[:-1]:
            index = letter_to_index(ch)
            if node.children[index] is None:
                node.children[index] = TrieNode()
                node.out_degree += 1
            node = node.children[index]

        index = letter_to_index(s[-1])
        child = node.children[index]
        if child is None:
            node.children[index] = TrieNode(terminal=True)
            node.out_degree += 1
            return True
        if child.terminal:
            return False
        # Already on the path of a longer word.
        child.terminal = True
        return True

    def is_present(self, word: str) -> bool:
        if not is_valid_word(word):
            return False
        node = self._walk(word.lower())
        return node is not None and node.terminal

    def delete(self, word: str) -> bool:
        """Remove ``word``, pruning nodes no other word needs.

        Returns True if the word was stored and has been removed, False if
        it was not present (the trie is left untouched).
        """
        if not self.is_present(word):
            return False
        self._delete(word.lower())
        return True

    def enumerate(self) -> Iterator[str]:
        """Yield every stored word in lexicographic order."""
        return self._words()

    def count(self) -> int:
        """Number of stored words."""
        return self._count()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_present(word)

    def __iter__(self) -> Iterator[str]:
        return self.enumerate()

    def __len__(self) -> int:
        return self.count()

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children[letter_to_index(ch)]
            if node is None:
                return None
        return node

    def _delete(self, s: str) -> None:
        # Callers guarantee s is present, so every slot on the path is filled.
        path: list[tuple[TrieNode, int]] = []
        node = self.root
        for ch in s:
            index = letter_to_index(ch)
            path.append((node, index))
            node = node.children[index]

        parent, index = path.pop()
        if node.out_degree == 0:
            self._unlink(parent, index, s)
        else:
            # Longer words continue through this node.
            node.terminal = False
        signal = self._prune_signal(parent)

        while path and signal is Prune.UNLINK:
            parent, index = path.pop()
            self._unlink(parent, index, s[: len(path) + 1])
            signal = self._prune_signal(parent)

    @staticmethod
    def _prune_signal(node: TrieNode) -> Prune:
        if node.out_degree == 0 and not node.terminal:
            return Prune.UNLINK
        return Prune.KEEP

    @staticmethod
    def _unlink(node: TrieNode, index: int, prefix: str) -> None:
        node.children[index] = None
        node.out_degree -= 1
        log.debug("Pruned node for prefix %r", prefix)

    def _words(self) -> Iterator[str]:
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.terminal:
                yield prefix
            # Pushed z..a so that a is popped first.
            for index in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[index]
                if child is not None:
                    stack.append((child, prefix + ALPHABET[index]))

    def _count(self) -> int:
        total = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.terminal:
                total += 1
            stack.extend(child for child in node.children if child is not None)
        return total
