from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol, Sequence

import numpy as np

# "New" Boggle dice, 1987 to ~2008. A Q face is the Qu cube face.
DICE = [
    "AAEEGN", "ACHOPS", "AFFKPS", "ABJOOB",
    "CIIMOT", "DELRVY", "DEILRX", "EEINSU",
    "EEGHNW", "HLNNRZ", "DISTTY", "AOOTTW",
    "ELRTTY", "EIOSST", "EHRTUV", "HIMNQU",
]

# Relative letter frequencies in English text, in percent.
LETTER_FREQUENCIES = {
    "A": 8.17, "B": 1.49, "C": 2.78, "D": 4.25, "E": 12.70, "F": 2.23,
    "G": 2.02, "H": 6.09, "I": 6.97, "J": 0.15, "K": 0.77, "L": 4.03,
    "M": 2.41, "N": 6.75, "O": 7.51, "P": 1.93, "Q": 0.10, "R": 5.99,
    "S": 6.33, "T": 9.06, "U": 2.76, "V": 0.98, "W": 2.36, "X": 0.15,
    "Y": 1.97, "Z": 0.07,
}


class InvalidBoardError(ValueError):
    pass


class Board(Protocol):
    """Read-only letter grid consumed by the search engine.

    Letters are single uppercase A-Z characters; a "Q" cell stands for "QU".
    """

    @property
    def rows(self) -> int: ...

    @property
    def cols(self) -> int: ...

    def letter_at(self, row: int, col: int) -> str: ...


def _clean_cell(token) -> str:
    letter = str(token).strip().upper()
    if letter == "QU":
        return "Q"
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        raise InvalidBoardError(f"Invalid board cell {token!r}: expected a letter A-Z or 'Qu'")
    return letter


class GridBoard:
    """Immutable rectangular board backed by a numpy array of letters."""

    def __init__(self, grid: Sequence[Sequence[str]]):
        if len(grid) == 0:
            raise InvalidBoardError("Board has no rows")
        cells = [[_clean_cell(token) for token in row] for row in grid]
        width = len(cells[0])
        if width == 0:
            raise InvalidBoardError("Board has no columns")
        for r, row in enumerate(cells):
            if len(row) != width:
                raise InvalidBoardError(f"Row {r} has {len(row)} cells, expected {width}")
        self._grid = np.array(cells, dtype="<U1")
        self._grid.flags.writeable = False

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> GridBoard:
        """Build a board from one string per row, one letter per cell."""
        return cls([list(row.strip()) for row in rows])

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        return self._grid.shape[1]

    def letter_at(self, row: int, col: int) -> str:
        return str(self._grid[row, col])

    def to_rows(self) -> list[str]:
        return ["".join(row) for row in self._grid.tolist()]

    def __eq__(self, other):
        if not isinstance(other, GridBoard):
            return NotImplemented
        return np.array_equal(self._grid, other._grid)

    def __hash__(self):
        return hash(tuple(self.to_rows()))

    def __repr__(self):
        return f"GridBoard({self.to_rows()!r})"

    def __str__(self):
        return "\n".join(
            " ".join("Qu" if letter == "Q" else letter for letter in row)
            for row in self._grid.tolist()
        )


def parse_board(text: str) -> GridBoard:
    """Parse the board text format: "ROWS COLS" followed by ROWS*COLS cell tokens."""
    tokens = text.split()
    if len(tokens) < 2:
        raise InvalidBoardError("Board text must start with the row and column counts")
    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise InvalidBoardError(f"Bad board dimensions: {tokens[0]!r} {tokens[1]!r}") from None
    if rows <= 0 or cols <= 0:
        raise InvalidBoardError(f"Bad board dimensions: {rows}x{cols}")
    cells = tokens[2:]
    if len(cells) != rows * cols:
        raise InvalidBoardError(f"Expected {rows * cols} cells for a {rows}x{cols} board, got {len(cells)}")
    return GridBoard([cells[r * cols:(r + 1) * cols] for r in range(rows)])


def load_board(path: str | Path) -> GridBoard:
    with open(path, "r", encoding="utf-8") as f:
        return parse_board(f.read())


def random_board(rows: int = 4, cols: int = 4, rng: np.random.Generator | None = None) -> GridBoard:
    """Roll a random board.

    A 4x4 board shuffles and rolls the 16 Boggle dice; any other size draws
    each cell independently by English letter frequency.
    """
    if rows <= 0 or cols <= 0:
        raise InvalidBoardError(f"Bad board dimensions: {rows}x{cols}")
    if rng is None:
        rng = np.random.default_rng()
    if (rows, cols) == (4, 4):
        cells = [DICE[i][rng.integers(len(DICE[i]))] for i in rng.permutation(len(DICE))]
    else:
        letters = list(LETTER_FREQUENCIES)
        weights = np.array(list(LETTER_FREQUENCIES.values()))
        cells = rng.choice(letters, size=rows * cols, p=weights / weights.sum()).tolist()
    return GridBoard([cells[r * cols:(r + 1) * cols] for r in range(rows)])
