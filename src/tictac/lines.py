"""
Line scanning shared by win detection and the move heuristic.

A line is any row, column or one of the two full-length diagonals:
  - main diagonal: (0, 0) -> (N-1, N-1)
  - anti-diagonal: (N-1, 0) -> (0, N-1)

Lines are always yielded rows first (top to bottom), then columns (left to
right), then the main diagonal, then the anti-diagonal.
"""

from enum import IntEnum
from typing import Iterator, NamedTuple, Optional, Tuple

Cell = Tuple[int, int]


class Dimension(IntEnum):
    ROWS = 0
    COLS = 1
    DIAGS = 2


class Line(NamedTuple):
    dimension: Dimension
    index: int
    cells: Tuple[Cell, ...]


def row_cells(size: int, row: int) -> Tuple[Cell, ...]:
    return tuple((row, col) for col in range(size))


def col_cells(size: int, col: int) -> Tuple[Cell, ...]:
    return tuple((row, col) for row in range(size))


def diag_cells(size: int, index: int) -> Tuple[Cell, ...]:
    """Index 0 is the main diagonal, index 1 the anti-diagonal."""
    if index == 0:
        return tuple((i, i) for i in range(size))
    return tuple((size - 1 - i, i) for i in range(size))


def iter_lines(size: int) -> Iterator[Line]:
    """Yield every line of an N x N board in scan order."""
    for row in range(size):
        yield Line(Dimension.ROWS, row, row_cells(size, row))
    for col in range(size):
        yield Line(Dimension.COLS, col, col_cells(size, col))
    for index in range(2):
        yield Line(Dimension.DIAGS, index, diag_cells(size, index))


def line_owner(board, cells: Tuple[Cell, ...]) -> Optional[int]:
    """Return the piece filling every cell of the line, else None."""
    owner = None
    for row, col in cells:
        piece = board.get(row, col)
        if piece is None:
            return None
        if owner is None:
            owner = piece
        elif piece != owner:
            return None
    return owner


def line_weight(board, piece: int, cells: Tuple[Cell, ...]) -> Tuple[int, Optional[Cell]]:
    """
    Weight of a line for `piece` and its candidate move.

    Returns:
        (weight, candidate) where weight is the number of empty cells if no
        other piece sits on the line, or N if one does. The candidate is the
        last empty cell seen, or None for blocked and fully owned lines.
    """
    size = len(cells)
    weight = 0
    candidate = None
    for row, col in cells:
        occupant = board.get(row, col)
        if occupant is None:
            weight += 1
            candidate = (row, col)
        elif occupant != piece:
            return size, None
    return weight, candidate
