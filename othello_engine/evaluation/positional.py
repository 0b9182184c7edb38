"""
Positional Weight-Table Evaluation

Static evaluator that scores each occupied square with a fixed weight:
    - Corners: +100 (can never be flipped)
    - X/C squares next to corners: -20 to -50 (give corners away)
    - Edges: +5 to +10
    - Interior: 0, with -2 on the ring just inside the edges

Score = sum(weights under Black discs) - sum(weights under White discs)

Disc count itself is not part of the score; a position where Black owns
more discs but on worse squares can still evaluate in White's favour.
"""

import numpy as np

from othello_engine.board.board import Board
from othello_engine.board.cells import Cell
from othello_engine.evaluation.base import Evaluator

#fmt: off
WEIGHT_TABLE = np.array([
    [100, -20,  10,   5,   5,  10, -20, 100],
    [-20, -50,  -2,  -2,  -2,  -2, -50, -20],
    [ 10,  -2,   0,   0,   0,   0,  -2,  10],
    [  5,  -2,   0,   0,   0,   0,  -2,   5],
    [  5,  -2,   0,   0,   0,   0,  -2,   5],
    [ 10,  -2,   0,   0,   0,   0,  -2,  10],
    [-20, -50,  -2,  -2,  -2,  -2, -50, -20],
    [100, -20,  10,   5,   5,  10, -20, 100],
], dtype=np.int32)
#fmt: on


class PositionalEvaluator(Evaluator):
    """
    Evaluation by square weights only.

    Attributes:
        weights: (8, 8) weight table indexed [y, x]
    """

    def __init__(self, weights: np.ndarray = WEIGHT_TABLE):
        if weights.shape != WEIGHT_TABLE.shape:
            raise ValueError(f"Invalid weight table shape: {weights.shape}")
        self.weights = weights

    def evaluate(self, board: Board) -> int:
        black_score = 0
        white_score = 0

        for y, row in enumerate(board.grid):
            for x, cell in enumerate(row):
                if cell == Cell.BLACK:
                    black_score += int(self.weights[y, x])
                elif cell == Cell.WHITE:
                    white_score += int(self.weights[y, x])

        return black_score - white_score
