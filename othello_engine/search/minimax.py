"""
Minimax Search with Alpha-Beta Pruning

This module implements the move selection for computer-controlled sides.
Minimax explores the game tree assuming optimal play by both sides, and
alpha-beta pruning skips branches that cannot change the result.

Key Concepts:
    - Scores are always Black-favouring (see evaluation.base)
    - The root keeps the highest score whichever colour moves, and each
      reply is searched as the minimizing side
    - Every child position is searched on a cloned Board, never in place
    - Move order is fixed: row-major (y outer, x inner)

Pass Handling:
    A node with no legal move for the side to move returns the static
    evaluation instead of passing and searching on. This is a known
    approximation of real pass semantics.

Algorithm Complexity:
    - Branching factor <= 60 empty squares, typically around 10
    - Root move + depth 3 below it: tens of thousands of leaves worst case
"""

import logging
from typing import List, Optional, Tuple

from othello_engine.board.board import Board
from othello_engine.evaluation.base import INFINITY, Evaluator
from othello_engine.evaluation.positional import PositionalEvaluator

logger = logging.getLogger(__name__)

# Plies searched below each root move
SEARCH_DEPTH = 3

Move = Tuple[int, int]


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    evaluator: Optional[Evaluator] = None,
    nodes_searched: Optional[List[int]] = None,
    prune: bool = True,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Position to search (not modified)
        depth: Remaining search depth
        maximizing: True if this node picks the highest score
        alpha: Best score the maximizer is already assured of
        beta: Best score the minimizer is already assured of
        evaluator: Position evaluator (default: PositionalEvaluator)
        nodes_searched: Optional mutable list [count] to track nodes visited
        prune: If False, search full width (used to verify pruning)

    Returns:
        int: Black-favouring score of the position

    Algorithm:
        1. depth = 0 → static evaluation
        2. For each legal move of board.current_player:
            a. Clone the board and play the move on the clone
            b. Recurse with depth - 1 and the other side maximizing
            c. Update best score and alpha/beta
            d. Stop once beta <= alpha
        3. No legal move → static evaluation
    """
    if evaluator is None:
        evaluator = PositionalEvaluator()

    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth == 0:
        return evaluator.evaluate(board)

    moves = board.legal_moves()
    if not moves:
        return evaluator.evaluate(board)

    if maximizing:
        best = -INFINITY
        for x, y in moves:
            child = board.clone()
            child.place_piece(x, y)

            score = minimax(
                child, depth - 1, False, alpha, beta,
                evaluator, nodes_searched, prune,
            )

            best = max(best, score)
            alpha = max(alpha, best)

            if prune and beta <= alpha:
                break
    else:
        best = INFINITY
        for x, y in moves:
            child = board.clone()
            child.place_piece(x, y)

            score = minimax(
                child, depth - 1, True, alpha, beta,
                evaluator, nodes_searched, prune,
            )

            best = min(best, score)
            beta = min(beta, best)

            if prune and beta <= alpha:
                break

    return best


def choose_move(
    board: Board,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[Optional[Move], Optional[int], int]:
    """
    Pick a move for the side to move.

    Each legal root move is played on a clone and scored with a
    SEARCH_DEPTH minimax in which the reply minimizes. The move with the
    strictly greatest Black-favouring score is kept for either colour;
    on equal scores the first move in row-major order wins.

    Args:
        board: Current position (not modified)
        evaluator: Position evaluator (default: PositionalEvaluator)

    Returns:
        Tuple of (move, score, nodes)
            - move: (x, y) to play, or None if there is no legal move
            - score: Black-favouring score of the chosen move, or None
            - nodes: Number of positions visited
    """
    if evaluator is None:
        evaluator = PositionalEvaluator()

    mover = board.current_player

    best_move: Optional[Move] = None
    best_score: Optional[int] = None
    nodes = [0]

    for x, y in board.legal_moves():
        child = board.clone()
        child.place_piece(x, y)

        score = minimax(
            child,
            SEARCH_DEPTH,
            False,
            -INFINITY,
            INFINITY,
            evaluator,
            nodes,
        )

        if best_score is None or score > best_score:
            best_score = score
            best_move = (x, y)

    if best_move is None:
        logger.debug("No legal move for %s", mover.name)
    else:
        logger.debug(
            "%s chooses %s score=%s nodes=%d",
            mover.name, best_move, best_score, nodes[0],
        )

    return best_move, best_score, nodes[0]
