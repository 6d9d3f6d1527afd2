"""
Players and the AI move arbiter.

A player is anything that can place its piece on a board:
  - HumanPlayer: asks an input collaborator for coordinates
  - AIPlayer: weighs its own lines and every opponent's, then picks a move
"""

from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Protocol, Sequence, Tuple

import numpy as np

from .board import Board, Move
from .errors import InvalidArgumentError, InvalidStateError
from .strategy import best_move, min_of, random_move

# Chance of ignoring the heuristic and playing a random cell
RANDOM_CHANCE = 0.25


class Player(Protocol):
    piece: int
    name: str

    def place_piece(self, board: Board) -> Move:
        ...


class Reason(Enum):
    RANDOM = "random"
    WIN = "win"
    BLOCK = "block"
    FALLBACK = "fallback"
    BEST = "best"


class Decision(NamedTuple):
    move: Move
    reason: Reason


def _check_piece(piece: int):
    if not isinstance(piece, int) or isinstance(piece, bool) or piece < 0:
        raise InvalidArgumentError(f"Pieces must be non-negative integers, got {piece!r}.")


def choose_move(
    size: int,
    own: Tuple[int, Optional[Move]],
    opponents: Sequence[Tuple[int, Optional[Move]]],
    rand_move: Move,
    be_random: bool,
) -> Decision:
    """
    Pick one move out of the heuristic candidates.

    Priority: random draw, own win, blocking the most urgent opponent,
    random when nothing productive is left, own best line.
    """
    own_weight, own_move = own
    op_weight, op_index = min_of([weight for weight, _ in opponents])
    op_move = opponents[op_index][1]

    if be_random:
        return Decision(rand_move, Reason.RANDOM)
    if own_weight == 1:
        return Decision(own_move, Reason.WIN)
    if op_weight == 1:
        return Decision(op_move, Reason.BLOCK)
    if own_weight == size or own_move is None:
        return Decision(rand_move, Reason.FALLBACK)
    return Decision(own_move, Reason.BEST)


class HumanPlayer:
    """
    Player driven by an input collaborator.

    `read_move(board, player)` returns the (row, col) to play; the board
    validates it again on placement.
    """

    def __init__(self, piece: int, name: str, read_move: Callable[[Board, "HumanPlayer"], Move]):
        _check_piece(piece)
        self.piece = piece
        self.name = name
        self.read_move = read_move

    def place_piece(self, board: Board) -> Move:
        if board.is_full():
            raise InvalidStateError("Board is full so a move can't be made.")
        row, col = self.read_move(board, self)
        board.place(row, col, self.piece)
        return row, col

    def __repr__(self) -> str:
        return f"HumanPlayer(piece={self.piece}, name={self.name!r})"


class AIPlayer:
    """Heuristic player that wins, blocks, or plays its best line."""

    def __init__(
        self,
        piece: int,
        opponents: Sequence[int],
        name: str = "Robot",
        rng: Optional[np.random.Generator] = None,
        random_chance: float = RANDOM_CHANCE,
    ):
        _check_piece(piece)
        if len(opponents) == 0:
            raise InvalidArgumentError("An AI needs at least one opponent piece.")
        for op_piece in opponents:
            _check_piece(op_piece)
            if op_piece == piece:
                raise InvalidArgumentError(f"piece {piece} shouldn't be the same as an opponent piece.")
        if not 0.0 <= random_chance <= 1.0:
            raise InvalidArgumentError(f"random_chance must be in [0, 1], got {random_chance}.")

        self.piece = piece
        self.opponents: List[int] = list(opponents)
        self.name = name
        self.rng = rng if rng is not None else np.random.default_rng()
        self.random_chance = random_chance
        self.last_decision: Optional[Decision] = None

    def decide(self, board: Board) -> Decision:
        """Choose a move without touching the board."""
        if board.is_full():
            raise InvalidStateError("Board is full so a move can't be made.")

        own = best_move(self.piece, board)
        opponents = [best_move(op_piece, board) for op_piece in self.opponents]
        be_random = bool(self.rng.random() < self.random_chance)
        rand_move = random_move(board, self.rng)

        return choose_move(board.size, own, opponents, rand_move, be_random)

    def place_piece(self, board: Board) -> Move:
        decision = self.decide(board)
        row, col = decision.move
        board.place(row, col, self.piece)
        self.last_decision = decision
        return decision.move

    def __repr__(self) -> str:
        return f"AIPlayer(piece={self.piece}, opponents={self.opponents}, name={self.name!r})"
