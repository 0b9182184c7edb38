"""
Self-Play Benchmarking

Plays the computer against itself to measure search speed and to check
that whole games run to a proper finish.

The search is deterministic, so every game from the standard opening is
identical. To get a spread of positions, each game can start with a
number of random opening plies drawn from a seeded numpy generator.

Evaluation Metrics:
    - Result: BLACK_WINS / WHITE_WINS / DRAW by final disc count
    - Moves and passes played
    - Nodes searched and time per game
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from othello_engine.board.board import Board
from othello_engine.board.cells import Cell
from othello_engine.evaluation.base import Evaluator
from othello_engine.game.state import GameResult, classify_result
from othello_engine.search.minimax import choose_move

logger = logging.getLogger(__name__)


@dataclass
class SelfPlayResult:
    """
    Result of one computer-vs-computer game.

    Attributes:
        result: Final GameResult
        black_count: Black discs at the end
        white_count: White discs at the end
        moves: Discs placed (opening plies included)
        passes: Turns skipped because the side to move was stuck
        nodes_searched: Total positions visited by the search
        time_taken: Wall-clock seconds
        opening: Random opening moves played before the search took over
    """
    result: GameResult
    black_count: int
    white_count: int
    moves: int
    passes: int
    nodes_searched: int
    time_taken: float
    opening: List[Tuple[int, int]] = field(default_factory=list)


def play_self_play_game(
    evaluator: Optional[Evaluator] = None,
    opening_plies: int = 0,
    rng: Optional[np.random.Generator] = None,
) -> SelfPlayResult:
    """
    Play one full game with the search choosing moves for both colours.

    Args:
        evaluator: Position evaluator (default: PositionalEvaluator)
        opening_plies: Number of random legal moves played first
        rng: Random generator for the opening (default: seed 0)

    Returns:
        SelfPlayResult
    """
    if rng is None:
        rng = np.random.default_rng(0)

    board = Board()
    opening = []
    moves = passes = nodes = 0
    start_time = time.time()

    while True:
        if not board.has_any_legal_move(Cell.BLACK) and not board.has_any_legal_move(Cell.WHITE):
            break

        legal = board.legal_moves()
        if not legal:
            board.pass_turn()
            passes += 1
            continue

        if len(opening) < opening_plies:
            move = legal[int(rng.integers(len(legal)))]
            opening.append(move)
        else:
            move, _, searched = choose_move(board, evaluator)
            nodes += searched

        board.place_piece(*move)
        moves += 1

    black_count, white_count = board.disc_counts()
    return SelfPlayResult(
        result=classify_result(black_count, white_count),
        black_count=black_count,
        white_count=white_count,
        moves=moves,
        passes=passes,
        nodes_searched=nodes,
        time_taken=time.time() - start_time,
        opening=opening,
    )


def run_self_play(
    num_games: int,
    evaluator: Optional[Evaluator] = None,
    opening_plies: int = 4,
    seed: int = 0,
    verbose: bool = False,
) -> Dict:
    """
    Play a batch of self-play games.

    Args:
        num_games: Number of games to play
        evaluator: Position evaluator (default: PositionalEvaluator)
        opening_plies: Random opening moves per game
        seed: Seed for the opening generator
        verbose: If True, print one line per game

    Returns:
        Dictionary with 'results', 'tally' (GameResult -> count),
        'total_nodes' and 'total_time'
    """
    if num_games <= 0:
        raise ValueError(f"num_games must be positive, got {num_games}")

    rng = np.random.default_rng(seed)
    results = []

    for i in tqdm(range(num_games), desc="Self-play", leave=False, disable=verbose):
        game_result = play_self_play_game(evaluator, opening_plies, rng)
        results.append(game_result)

        logger.info(
            f"Game {i + 1}: {game_result.result.name} "
            f"{game_result.black_count}-{game_result.white_count}, "
            f"nodes={game_result.nodes_searched}"
        )
        if verbose:
            print(
                f"Game {i + 1:3d}: {game_result.result.name:<10} "
                f"{game_result.black_count:2d}-{game_result.white_count:<2d} "
                f"moves={game_result.moves} passes={game_result.passes} "
                f"nodes={game_result.nodes_searched:,} "
                f"time={game_result.time_taken:.2f}s"
            )

    tally = {outcome: 0 for outcome in (GameResult.BLACK_WINS, GameResult.WHITE_WINS, GameResult.DRAW)}
    for r in results:
        tally[r.result] += 1

    return {
        'results': results,
        'tally': tally,
        'total_nodes': sum(r.nodes_searched for r in results),
        'total_time': sum(r.time_taken for r in results),
    }
