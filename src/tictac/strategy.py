"""
One-ply move heuristic.

Every line is weighed for a piece (number of empty cells left before the
piece completes it, or N when another piece blocks it). The lowest weight
wins; ties go to the line scanned first.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from .board import Board, Move
from .errors import InvalidArgumentError, InvalidStateError
from .lines import Dimension, iter_lines, line_weight


def min_of(weights: Sequence[int]) -> Tuple[int, int]:
    """
    Minimum of a sequence and the index of its first occurrence.

    >>> min_of([5, 2, 2, 9])
    (2, 1)
    """
    if len(weights) == 0:
        raise InvalidArgumentError("Length of weights must be greater than zero.")
    min_index = 0
    for index in range(1, len(weights)):
        if weights[index] < weights[min_index]:
            min_index = index
    return weights[min_index], min_index


def best_move(piece: int, board: Board) -> Tuple[int, Optional[Move]]:
    """
    Best line to play for `piece`.

    Returns:
        (weight, move) where weight is 0 if the piece already owns a line,
        1 if it can complete a line this turn and N if every line is blocked.
        move is None only for weights 0 and N.
    """
    if board.is_full():
        raise InvalidStateError("Board is full so a move can't be made.")

    weights = {dim: [] for dim in Dimension}
    moves = {dim: [] for dim in Dimension}
    for line in iter_lines(board.size):
        w, candidate = line_weight(board, piece, line.cells)
        weights[line.dimension].append(w)
        moves[line.dimension].append(candidate)

    # Best line within each dimension, then across dimensions
    dim_weights = []
    dim_moves = []
    for dim in Dimension:
        w, index = min_of(weights[dim])
        dim_weights.append(w)
        dim_moves.append(moves[dim][index])

    weight, dim_index = min_of(dim_weights)
    return weight, dim_moves[dim_index]


def random_move(board: Board, rng: Optional[np.random.Generator] = None) -> Move:
    """Uniformly random empty cell."""
    if board.is_full():
        raise InvalidStateError("Board is full so a move can't be made.")
    if rng is None:
        rng = np.random.default_rng()
    moves = board.empty_cells()
    return moves[int(rng.integers(len(moves)))]
