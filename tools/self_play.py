#!/usr/bin/env python3
"""
Self-Play Benchmark Runner

Plays the computer against itself and reports results, node counts and
search speed.

Usage:
    python tools/self_play.py [--games 10] [--opening-plies 4] [--seed 0] [--verbose]
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from othello_engine.evaluation import PositionalEvaluator
from othello_engine.game import GameResult
from othello_engine.search import SEARCH_DEPTH
from othello_engine.utils import run_self_play


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(games: int, opening_plies: int, seed: int, verbose: bool = False):
    """
    Run the self-play benchmark.

    Args:
        games: Number of games to play
        opening_plies: Random opening moves before the search takes over
        seed: Seed for the random openings
        verbose: If True, print one line per game
    """
    evaluator = PositionalEvaluator()

    print("=" * 80)
    print("SELF-PLAY BENCHMARK - Othello Engine")
    print("=" * 80)
    print("Evaluator: Positional (square weight table)")
    print(f"Search: Minimax with Alpha-Beta Pruning, depth {SEARCH_DEPTH}")
    print(f"Games: {games}, random opening plies: {opening_plies}, seed: {seed}")
    print("=" * 80)
    print()

    summary = run_self_play(
        games,
        evaluator=evaluator,
        opening_plies=opening_plies,
        seed=seed,
        verbose=verbose,
    )

    total_time = summary['total_time']
    total_nodes = summary['total_nodes']
    nodes_per_sec = total_nodes / total_time if total_time > 0 else 0
    tally = summary['tally']

    print(f"\nBlack wins: {tally[GameResult.BLACK_WINS]}")
    print(f"White wins: {tally[GameResult.WHITE_WINS]}")
    print(f"Draws:      {tally[GameResult.DRAW]}")
    print(f"Total time: {format_time(total_time)}")
    print(f"Avg time per game: {format_time(total_time / games)}")
    print(f"Total nodes: {total_nodes:,}")
    print(f"Nodes/sec: {nodes_per_sec:,.0f}")

    print("\n" + "=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return summary


def main():
    parser = argparse.ArgumentParser(
        description="Play the engine against itself"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=10,
        help="Number of games to play (default: 10)"
    )
    parser.add_argument(
        "--opening-plies",
        type=int,
        default=4,
        help="Random opening moves per game (default: 4)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for the random openings (default: 0)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print one line per game"
    )

    args = parser.parse_args()

    if args.games <= 0:
        print("Error: --games must be positive")
        sys.exit(1)

    try:
        run_benchmark(args.games, args.opening_plies, args.seed, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
