#!/usr/bin/env python3
"""
Play TicTacToe in the console.

Usage:
    python play.py                         # one human vs one AI
    python play.py --humans 0 --ais 2      # watch two AIs
    python play.py --size 4 --humans 2 --ais 1 --compact
    python play.py --config game.json --seed 7
"""

import sys
import argparse
from dataclasses import replace
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictac import (
    AIPlayer,
    Board,
    GameConfig,
    build_players,
    play_game,
    prompt_move,
    render_board,
)


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe against the AI")
    parser.add_argument("--config", type=str, default=None, help="JSON game config")
    parser.add_argument("--size", type=int, default=None, help="Board size")
    parser.add_argument("--humans", type=int, default=None, help="Number of human players")
    parser.add_argument("--ais", type=int, default=None, help="Number of AI players")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--random-chance", type=float, default=None,
                        help="Chance an AI plays a random cell")
    parser.add_argument("--compact", action="store_true", help="Plain one-character board")

    args = parser.parse_args()

    # Config: file first, flags on top
    config = GameConfig.from_json(args.config) if args.config else GameConfig()
    overrides = {
        "size": args.size,
        "humans": args.humans,
        "ais": args.ais,
        "seed": args.seed,
        "random_chance": args.random_chance,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    if args.compact:
        config = replace(config, pretty=False)
    config.validate()

    board = Board(config.size)
    players = build_players(config, read_move=prompt_move)

    def on_turn(player, board):
        print(f"\nIt is now {player.name}'s turn!")
        print(render_board(board, pretty=config.pretty))

    def on_move(player, move, board):
        if isinstance(player, AIPlayer) and player.last_decision is not None:
            print(f"{player.name} plays {move} [{player.last_decision.reason.value}]")
        else:
            print(f"Placed piece at {move[0]}, {move[1]}!")

    try:
        result = play_game(board, players, on_turn=on_turn, on_move=on_move)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return

    print()
    print(render_board(result.board, pretty=config.pretty))
    if result.is_draw:
        print("No winners!")
    else:
        print(f"{result.winner_name} is the winner! Woo!")


if __name__ == "__main__":
    main()
