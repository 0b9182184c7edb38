"""
Cell values and board constants shared by the board, rules and search.
"""

from enum import Enum
from typing import List

BOARD_SIZE = 8


class Cell(Enum):
    """
    State of a single board square.

    Values match the integer encoding used by board_to_array():
        0 = empty, 1 = black disc, 2 = white disc
    """
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Cell":
        """
        The other disc colour.

        Raises:
            ValueError: If called on Cell.EMPTY
        """
        if self is Cell.BLACK:
            return Cell.WHITE
        if self is Cell.WHITE:
            return Cell.BLACK
        raise ValueError("Cell.EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        """Single character used in text diagrams."""
        return _SYMBOLS[self]


_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}

# grid[y][x]
Grid = List[List[Cell]]
