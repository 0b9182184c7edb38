"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
The search only talks to this interface, so evaluators can be swapped
without touching minimax.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always scores from Black's perspective
    3. Positive = Black advantage, Negative = White advantage
"""

from abc import ABC, abstractmethod

from othello_engine.board.board import Board

# Bound used as the initial alpha-beta window
INFINITY = float("inf")


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(board): Returns a Black-favouring integer score
    """

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """
        Evaluate a position from Black's perspective.

        Args:
            board: Board to evaluate

        Returns:
            int: Score (positive favours Black)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
