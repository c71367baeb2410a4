from __future__ import annotations

from typing import Iterable

from boggle_solver.trie import WordTrie

#         0  1  2  3  4  5  6  7  8+
SCORES = (0, 0, 0, 1, 1, 2, 3, 5, 11)


def points_for_length(length: int) -> int:
    return SCORES[min(length, len(SCORES) - 1)]


def score_of(word: str, trie: WordTrie) -> int:
    """Points for ``word``, or 0 if it is not in the dictionary."""
    if not trie.contains(word):
        return 0
    return points_for_length(len(word))


def total_score(words: Iterable[str], trie: WordTrie) -> int:
    return sum(score_of(word, trie) for word in words)
