"""
Board state for N x N tic-tac-toe.

Cells hold an optional piece: None marks an empty cell, any integer >= 0 is
a player's piece. Cells are only ever filled, never cleared or overwritten.
"""

import numbers
from typing import List, Optional, Tuple

from .errors import InvalidArgumentError, InvalidStateError
from .lines import iter_lines, line_owner

# Default board size (rows == cols == pieces in a row needed to win)
SIZE = 3

Move = Tuple[int, int]


def _is_integer(value) -> bool:
    """Python and numpy integers, but not bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Board:
    """Mutable N x N grid of optional pieces."""

    def __init__(self, size: int = SIZE):
        if not _is_integer(size) or size < 2:
            raise InvalidArgumentError(f"Board size must be an integer >= 2, got {size!r}.")
        self._size = int(size)
        self._cells: List[List[Optional[int]]] = [[None] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def _check_coords(self, row: int, col: int) -> Move:
        coords = []
        for name, value in (("row", row), ("col", col)):
            if not _is_integer(value):
                raise InvalidArgumentError(f"{name} must be an integer, got {value!r}.")
            if not 0 <= value < self._size:
                raise InvalidArgumentError(
                    f"{name} {value} is out of range [0, {self._size - 1}]."
                )
            coords.append(int(value))
        return coords[0], coords[1]

    def place(self, row: int, col: int, piece: int):
        """Put `piece` on an empty cell."""
        row, col = self._check_coords(row, col)
        if not _is_integer(piece) or piece < 0:
            raise InvalidArgumentError(f"Pieces must be non-negative integers, got {piece!r}.")
        if self._cells[row][col] is not None:
            raise InvalidStateError(f"Piece already exists at {row}, {col}.")
        self._cells[row][col] = int(piece)

    def get(self, row: int, col: int) -> Optional[int]:
        row, col = self._check_coords(row, col)
        return self._cells[row][col]

    def is_full(self) -> bool:
        return all(piece is not None for line in self._cells for piece in line)

    def empty_cells(self) -> List[Move]:
        """Empty cells in row-major order."""
        return [
            (row, col)
            for row in range(self._size)
            for col in range(self._size)
            if self._cells[row][col] is None
        ]

    def winner(self) -> Optional[int]:
        """
        Piece owning the first complete line, or None.

        Rows are checked top to bottom, then columns left to right, then the
        main diagonal, then the anti-diagonal.
        """
        for line in iter_lines(self._size):
            owner = line_owner(self, line.cells)
            if owner is not None:
                return owner
        return None

    def rows(self) -> Tuple[Tuple[Optional[int], ...], ...]:
        """Read-only snapshot of the grid."""
        return tuple(tuple(line) for line in self._cells)

    def copy(self) -> "Board":
        other = Board(self._size)
        other._cells = [list(line) for line in self._cells]
        return other

    def __repr__(self) -> str:
        return f"Board(size={self._size}, rows={self.rows()!r})"
