from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from boggle_solver.board import Board
from boggle_solver.scoring import score_of, total_score
from boggle_solver.search import find_all_words
from boggle_solver.ternary import TernaryTrie
from boggle_solver.trie import Trie

logger = logging.getLogger("boggle")

TRIE_VARIANTS = {
    "rway": Trie,
    "ternary": TernaryTrie,
}


def load_dictionary(path: str | Path) -> list[str]:
    """Read whitespace-separated words, upper-cased, skipping anything that is not A-Z."""
    words = []
    skipped = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            for token in line.split():
                word = token.upper()
                if word.isascii() and word.isalpha():
                    words.append(word)
                else:
                    logger.debug("Skipping dictionary entry %r", token)
                    skipped += 1
    logger.info("Read %d words from %s (%d skipped)", len(words), path, skipped)
    return words


class BoggleSolver:
    """Builds the dictionary trie once, then solves and scores boards against it."""

    def __init__(self, words: Iterable[str], variant: str = "rway"):
        if variant not in TRIE_VARIANTS:
            raise ValueError(f"Unknown trie variant {variant!r}, expected one of {sorted(TRIE_VARIANTS)}")
        self.variant = variant
        self.trie = TRIE_VARIANTS[variant].from_words(words)
        logger.info("Built %s trie: %d words, %d nodes", variant, len(self.trie), self.trie.num_nodes())

    @classmethod
    def from_file(cls, path: str | Path, variant: str = "rway") -> BoggleSolver:
        return cls(load_dictionary(path), variant)

    def __len__(self) -> int:
        return len(self.trie)

    def get_all_valid_words(self, board: Board) -> set[str]:
        return find_all_words(board, self.trie)

    def score_of(self, word: str) -> int:
        return score_of(word, self.trie)

    def total_score(self, words: Iterable[str]) -> int:
        return total_score(words, self.trie)

    def solve(self, board: Board, max_results: int = 0) -> tuple[list[str], int]:
        """Solve the board.

        Returns (words, score): words sorted longest first then alphabetically,
        capped at ``max_results`` when positive, and the score of every word
        found on the board regardless of the cap.
        """
        found = self.get_all_valid_words(board)
        score = self.total_score(found)
        result = sorted(found, key=lambda w: (-len(w), w))
        result = result[:max_results] if max_results > 0 else result
        return result, score
