from __future__ import annotations

import numpy as np

from boggle_solver.board import Board
from boggle_solver.trie import WordTrie

MIN_WORD_LENGTH = 3


def neighbor_cells(rows: int, cols: int) -> list[list[list[tuple[int, int]]]]:
    """In-bounds 8-neighbours of every cell, indexed as ``[row][col]``."""
    neighbors = []
    for r in range(rows):
        row = []
        for c in range(cols):
            adj = []
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    if dr == 0 and dc == 0:
                        continue
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < rows and 0 <= nc < cols:
                        adj.append((nr, nc))
            row.append(adj)
        neighbors.append(row)
    return neighbors


def find_all_words(board: Board, trie: WordTrie) -> set[str]:
    """Find every dictionary word of length >= 3 spelled by a path on the board.

    A path moves between 8-adjacent cells and never reuses a cell. A "Q" cell
    contributes "QU" to the word. The trie is walked in lock-step with the
    path, so a branch is abandoned as soon as it stops being a dictionary
    prefix.
    """
    rows, cols = board.rows, board.cols
    letters = [[board.letter_at(r, c) for c in range(cols)] for r in range(rows)]
    neighbors = neighbor_cells(rows, cols)
    found: set[str] = set()

    def dfs(r: int, c: int, node, path: list[str], visited: np.ndarray, d: int):
        letter = letters[r][c]
        if letter == "Q":
            path.append("Q")
            path.append("U")
        else:
            path.append(letter)

        next_node = trie.descend(node, path, d)
        if next_node is None:
            del path[d:]
            return

        if len(path) >= MIN_WORD_LENGTH and next_node.is_word:
            found.add("".join(path))

        visited[r, c] = True
        next_d = len(path)
        for nr, nc in neighbors[r][c]:
            if not visited[nr, nc]:
                dfs(nr, nc, next_node, path, visited, next_d)

        visited[r, c] = False
        del path[d:]

    for r in range(rows):
        for c in range(cols):
            dfs(r, c, trie.root, [], np.zeros((rows, cols), dtype=bool), 0)

    return found
