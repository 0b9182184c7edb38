"""
Search Module

Move selection for computer-controlled sides: depth-limited minimax with
alpha-beta pruning over the positional evaluator.

Key Components:
    - minimax: Core search algorithm with alpha-beta pruning
    - choose_move: Root-level search returning (move, score, nodes)
    - SEARCH_DEPTH: Fixed depth searched below each root move
"""

from othello_engine.search.minimax import SEARCH_DEPTH, choose_move, minimax

__all__ = ['minimax', 'choose_move', 'SEARCH_DEPTH']
