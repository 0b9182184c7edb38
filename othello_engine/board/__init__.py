"""
Board Module

This module owns the Othello position and the rules that act on it.

Key Components:
    - Cell: Empty / Black / White square state
    - Board: 8x8 grid plus side to move; place_piece(), clone()
    - rules: Pure legality, capture and mobility functions
    - board_to_array / board_from_diagram: Conversions for renderers and tests

Data Flow:
    Board.place_piece(x, y) → rules.is_legal_move() → rules.apply_flips()
"""

from othello_engine.board.board import Board
from othello_engine.board.cells import BOARD_SIZE, Cell
from othello_engine.board.representation import (
    array_to_board,
    board_from_diagram,
    board_to_array,
)

__all__ = [
    'BOARD_SIZE',
    'Cell',
    'Board',
    'board_to_array',
    'array_to_board',
    'board_from_diagram',
]
