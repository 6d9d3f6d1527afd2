#!/usr/bin/env python3
"""
Benchmark the heuristic TicTacToe AI.

Usage:
    python eval.py
    python eval.py --games 2000 --seed 1
    python eval.py --size 4 --save-dir runs/size4
"""

import sys
import json
import argparse
from pathlib import Path

from tqdm.auto import tqdm

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictac import GameConfig, play_records, results_frame, summarize, RANDOM_CHANCE


def main():
    parser = argparse.ArgumentParser(description="Evaluate the TicTacToe AI")
    parser.add_argument("--games", type=int, default=500, help="Number of games per opponent")
    parser.add_argument("--size", type=int, default=3, help="Board size")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--random-chance", type=float, default=RANDOM_CHANCE,
                        help="Chance the AI plays a random cell")
    parser.add_argument("--save-dir", type=str, default=None, help="Directory for config/summary/games.csv")
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bars")

    args = parser.parse_args()
    if args.games < 1:
        parser.error("--games must be at least 1")

    # Config
    config = GameConfig(size=args.size, humans=0, ais=2, seed=args.seed, random_chance=args.random_chance)
    config.validate()

    print("\n=== Evaluation ===")
    summaries = {}
    frames = []
    for opponent in ("random", "ai"):
        label = "Random" if opponent == "random" else "Self-play"
        tqdm.write(f"\nvs {label} ({args.games} games)...")
        records = play_records(
            games=args.games,
            size=config.size,
            seed=config.seed,
            random_chance=config.random_chance,
            opponent=opponent,
            progress=not args.no_progress,
        )
        s = summarize(records)
        summaries[opponent] = s
        print(f"  Wins:   {s['w']:.2%}")
        print(f"  Draws:  {s['d']:.2%}")
        print(f"  Losses: {s['l']:.2%}")
        print(f"  Moves:  {s['mean_moves']:.2f}")

        df = results_frame(records)
        df.insert(0, "opponent", opponent)
        frames.append(df)

    if args.save_dir:
        import pandas as pd

        run_dir = Path(args.save_dir)
        run_dir.mkdir(parents=True, exist_ok=True)
        config.to_json(run_dir / "config.json")
        with open(run_dir / "summary.json", "w") as f:
            json.dump(summaries, f, indent=2)
        pd.concat(frames, ignore_index=True).to_csv(run_dir / "games.csv", index=False)
        print(f"\n✓ Results saved to {run_dir}")


if __name__ == "__main__":
    main()
