"""
Heuristic TicTacToe - play N x N tic-tac-toe against a one-ply AI.

The AI weighs every row, column and diagonal, then wins, blocks or plays its
most promising line, with a dash of randomness.
"""

from .errors import InvalidArgumentError, InvalidStateError
from .board import Board, Move, SIZE
from .lines import Dimension, Line, iter_lines, line_owner, line_weight
from .strategy import min_of, best_move, random_move
from .players import Player, HumanPlayer, AIPlayer, Decision, Reason, choose_move, RANDOM_CHANCE
from .display import render_board, piece_symbol, MAX_PLAYERS
from .console import prompt_move
from .game import GameConfig, GameResult, build_players, play_game
from .eval import eval_vs_random, eval_self_play, play_records, results_frame, outcome_rates, summarize

__version__ = "0.1.0"
__all__ = [
    "InvalidArgumentError",
    "InvalidStateError",
    "Board",
    "Move",
    "SIZE",
    "Dimension",
    "Line",
    "iter_lines",
    "line_owner",
    "line_weight",
    "min_of",
    "best_move",
    "random_move",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "Decision",
    "Reason",
    "choose_move",
    "RANDOM_CHANCE",
    "render_board",
    "piece_symbol",
    "MAX_PLAYERS",
    "prompt_move",
    "GameConfig",
    "GameResult",
    "build_players",
    "play_game",
    "eval_vs_random",
    "eval_self_play",
    "play_records",
    "results_frame",
    "outcome_rates",
    "summarize",
]
