"""
Game setup and the turn loop.

Players take turns in a fixed order; after every move the board is checked
for a winner, then for a draw (full board).
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import numpy as np

from .board import SIZE, Board, Move
from .display import MAX_PLAYERS
from .errors import InvalidArgumentError
from .players import RANDOM_CHANCE, AIPlayer, HumanPlayer, Player


@dataclass
class GameConfig:
    """Game configuration."""

    # Board rows/cols
    size: int = SIZE

    # Player counts (humans take the first pieces)
    humans: int = 1
    ais: int = 1

    # AI randomness
    seed: Optional[int] = None
    random_chance: float = RANDOM_CHANCE

    # Display
    pretty: bool = True

    def validate(self):
        for name in ("size", "humans", "ais"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidArgumentError(f"{name} must be an integer, got {value!r}.")
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise InvalidArgumentError(f"seed must be an integer or None, got {self.seed!r}.")
        if not isinstance(self.random_chance, (int, float)) or isinstance(self.random_chance, bool):
            raise InvalidArgumentError(f"random_chance must be a number, got {self.random_chance!r}.")
        if not isinstance(self.pretty, bool):
            raise InvalidArgumentError(f"pretty must be a boolean, got {self.pretty!r}.")

        if self.size < 2:
            raise InvalidArgumentError(f"Board size must be at least 2, got {self.size}.")
        if self.humans < 0 or self.ais < 0:
            raise InvalidArgumentError("Player counts can't be negative.")
        if self.humans + self.ais < 1:
            raise InvalidArgumentError("A game needs at least one player.")
        if self.ais > 0 and self.humans + self.ais < 2:
            raise InvalidArgumentError("An AI needs at least one opponent.")
        if self.humans + self.ais > MAX_PLAYERS:
            raise InvalidArgumentError(
                f"At most {MAX_PLAYERS} players are supported, got {self.humans + self.ais}."
            )
        if not 0.0 <= self.random_chance <= 1.0:
            raise InvalidArgumentError(f"random_chance must be in [0, 1], got {self.random_chance}.")

    def to_json(self, path):
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def from_json(cls, path) -> "GameConfig":
        with open(path) as f:
            data = json.load(f)
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidArgumentError(f"Unknown config keys in {Path(path).name}: {sorted(unknown)}")
        return cls(**data)


@dataclass
class GameResult:
    """Outcome of a finished game. winner is None for a draw."""
    winner: Optional[int]
    winner_name: Optional[str]
    moves: int
    board: Board

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def build_players(
    config: GameConfig,
    read_move: Callable[[Board, HumanPlayer], Move],
    rng: Optional[np.random.Generator] = None,
) -> List[Player]:
    """Humans get pieces 0..humans-1, AIs the pieces after them."""
    config.validate()
    if rng is None:
        rng = np.random.default_rng(config.seed)

    players: List[Player] = []
    for index in range(config.humans):
        players.append(HumanPlayer(len(players), f"Human{index}", read_move))

    pieces = list(range(config.humans + config.ais))
    for index in range(config.ais):
        ai_piece = len(players)
        op_pieces = [piece for piece in pieces if piece != ai_piece]
        players.append(AIPlayer(
            ai_piece,
            op_pieces,
            name=f"Robot{index}",
            rng=rng,
            random_chance=config.random_chance,
        ))
    return players


def play_game(
    board: Board,
    players: Sequence[Player],
    on_turn: Optional[Callable[[Player, Board], None]] = None,
    on_move: Optional[Callable[[Player, Move, Board], None]] = None,
) -> GameResult:
    """Run turns until a player wins or the board is full."""
    if len(players) == 0:
        raise InvalidArgumentError("A game needs at least one player.")

    moves = 0
    while True:
        for player in players:
            if on_turn is not None:
                on_turn(player, board)

            move = player.place_piece(board)
            moves += 1

            if on_move is not None:
                on_move(player, move, board)

            winner = board.winner()
            if winner is not None:
                names = {p.piece: p.name for p in players}
                return GameResult(winner, names.get(winner), moves, board)

            if board.is_full():
                return GameResult(None, None, moves, board)
