"""
Evaluation Module

Static position evaluation for the search. Evaluators are SWAPPABLE: the
search works with anything implementing the Evaluator interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - PositionalEvaluator: Fixed square-weight table evaluation

Data Flow:
    Board → evaluator.evaluate() → int
                                   Positive = Black advantage
                                   Negative = White advantage
"""

from othello_engine.evaluation.base import Evaluator
from othello_engine.evaluation.positional import PositionalEvaluator, WEIGHT_TABLE

__all__ = ['Evaluator', 'PositionalEvaluator', 'WEIGHT_TABLE']
