"""
Evaluation functions.

Measures the heuristic AI against a uniformly random opponent and against
itself, alternating who moves first.
"""

from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from tqdm.auto import trange

from .board import SIZE, Board
from .errors import InvalidArgumentError
from .game import play_game
from .players import RANDOM_CHANCE, AIPlayer


def random_baseline(piece: int, opponents, rng: np.random.Generator, name: str = "Random") -> AIPlayer:
    """AI that always takes its random draw."""
    return AIPlayer(piece, opponents, name=name, rng=rng, random_chance=1.0)


def play_records(
    games: int = 500,
    size: int = SIZE,
    seed: Optional[int] = 0,
    random_chance: float = RANDOM_CHANCE,
    opponent: str = "random",
    progress: bool = True,
) -> List[Dict[str, object]]:
    """
    Play `games` games of the heuristic AI against `opponent`.

    The AI moves first in even-numbered games. opponent is "random" or
    "ai" (self-play).

    Returns:
        One record per game with keys 'game', 'ai_first', 'winner',
        'outcome' (win/draw/loss from the AI's side) and 'moves'.
    """
    if opponent not in ("random", "ai"):
        raise InvalidArgumentError(f"Unknown opponent {opponent!r}, expected 'random' or 'ai'.")
    rng = np.random.default_rng(seed)
    records = []

    for g in trange(games, desc=f"vs {opponent}", disable=not progress):
        ai_first = g % 2 == 0
        ai_piece = 0 if ai_first else 1
        op_piece = 1 - ai_piece

        ai = AIPlayer(ai_piece, [op_piece], name="Robot", rng=rng, random_chance=random_chance)
        if opponent == "random":
            other = random_baseline(op_piece, [ai_piece], rng)
        else:
            other = AIPlayer(op_piece, [ai_piece], name="Robot2", rng=rng, random_chance=random_chance)

        players = [ai, other] if ai_first else [other, ai]
        result = play_game(Board(size), players)

        if result.winner is None:
            outcome = "draw"
        elif result.winner == ai_piece:
            outcome = "win"
        else:
            outcome = "loss"

        records.append({
            "game": g,
            "ai_first": ai_first,
            "winner": result.winner,
            "outcome": outcome,
            "moves": result.moves,
        })

    return records


def results_frame(records: List[Dict[str, object]]) -> pd.DataFrame:
    """Per-game records as a DataFrame."""
    return pd.DataFrame(records, columns=["game", "ai_first", "winner", "outcome", "moves"])


def outcome_rates(records) -> Tuple[float, float, float]:
    """(win_rate, draw_rate, loss_rate) from the AI's side."""
    outcomes = np.array([r["outcome"] for r in records])
    total = len(outcomes)
    if total == 0:
        return float("nan"), float("nan"), float("nan")
    return (
        float(np.sum(outcomes == "win")) / total,
        float(np.sum(outcomes == "draw")) / total,
        float(np.sum(outcomes == "loss")) / total,
    )


def summarize(records) -> Dict[str, float]:
    """
    Summary of per-game records.

    Returns:
        Dict with 'games', 'w', 'd', 'l' and 'mean_moves'
    """
    w, d, l = outcome_rates(records)
    moves = [r["moves"] for r in records]
    return {
        "games": len(records),
        "w": w,
        "d": d,
        "l": l,
        "mean_moves": float(np.mean(moves)) if moves else float("nan"),
    }


def eval_vs_random(
    games: int = 500,
    size: int = SIZE,
    seed: Optional[int] = 0,
    random_chance: float = RANDOM_CHANCE,
    progress: bool = True,
) -> Tuple[float, float, float]:
    """
    Evaluate the AI vs a random opponent.

    Returns:
        (win_rate, draw_rate, loss_rate)
    """
    records = play_records(games, size, seed, random_chance, opponent="random", progress=progress)
    return outcome_rates(records)


def eval_self_play(
    games: int = 500,
    size: int = SIZE,
    seed: Optional[int] = 0,
    random_chance: float = RANDOM_CHANCE,
    progress: bool = True,
) -> Dict[str, float]:
    """
    Evaluate the AI against itself.

    Returns:
        Dict with 'games', 'first_w', 'second_w', 'draw' and 'mean_moves'
    """
    records = play_records(games, size, seed, random_chance, opponent="ai", progress=progress)
    total = len(records)
    if total == 0:
        return {"games": 0, "first_w": float("nan"), "second_w": float("nan"),
                "draw": float("nan"), "mean_moves": float("nan")}

    # Record winners are piece ids; piece 0 always moves first
    winners = [r["winner"] for r in records]
    return {
        "games": total,
        "first_w": sum(1 for w in winners if w == 0) / total,
        "second_w": sum(1 for w in winners if w == 1) / total,
        "draw": sum(1 for w in winners if w is None) / total,
        "mean_moves": float(np.mean([r["moves"] for r in records])),
    }
