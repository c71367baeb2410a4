from __future__ import annotations

from typing import Iterable, Protocol, Sequence

R = 26
LETTER_A = ord("A")


def letter_index(ch: str) -> int:
    i = ord(ch) - LETTER_A
    if not 0 <= i < R:
        raise IndexError(f"Letter {ch!r} is outside A-Z")
    return i


class WordTrie(Protocol):
    """Contract shared by the trie variants the search engine walks."""

    root: object

    def insert(self, word: str) -> None: ...

    def contains(self, word: str) -> bool: ...

    def descend(self, node, text: Sequence[str], start: int): ...


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * R
        self.is_word: bool = False


class Trie:
    """26-ary prefix tree over uppercase A-Z words."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def insert(self, word: str):
        if not word:
            raise ValueError("Cannot insert an empty word")
        node = self.root
        for ch in word:
            i = letter_index(ch)
            child = node.children[i]
            if child is None:
                child = node.children[i] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def contains(self, word: str) -> bool:
        if not word:
            return False
        node = self.descend(self.root, word, 0)
        return node is not None and node.is_word

    def descend(self, node: TrieNode | None, text: Sequence[str], start: int) -> TrieNode | None:
        """Follow child links from ``node`` for each character of ``text[start:]``.

        Returns the node reached, or None as soon as a letter has no child.
        The search engine passes the node for the previous path and the index
        of the newly appended letters, so only the new suffix is walked.
        """
        for d in range(start, len(text)):
            if node is None:
                return None
            node = node.children[letter_index(text[d])]
        return node

    def num_nodes(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in node.children if child is not None)
        return count

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie
