"""
Board Representation

Conversions between Board objects and plain data that a presentation layer
(or a test) can work with.

Array Encoding (8x8 int8):
    0: Empty
    1: Black disc
    2: White disc

Text Diagram:
    8 lines of 8 symbols, optionally space separated:
        '.' = empty, 'B' = black, 'W' = white
    Row 0 is the top line. Column 0 is the leftmost symbol.

Data Flow:
    Board → board_to_array() → (8, 8) numpy array → renderer
    text diagram → board_from_diagram() → Board  (test fixtures, console)
"""

import numpy as np

from othello_engine.board.board import Board
from othello_engine.board.cells import BOARD_SIZE, Cell

SYMBOL_TO_CELL = {".": Cell.EMPTY, "B": Cell.BLACK, "W": Cell.WHITE}


def board_to_array(board: Board) -> np.ndarray:
    """
    Convert a board to an (8, 8) int8 array of Cell values.

    Args:
        board: Board to convert

    Returns:
        numpy array indexed [y, x]
    """
    array = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

    for y, row in enumerate(board.grid):
        for x, cell in enumerate(row):
            array[y, x] = cell.value

    return array


def array_to_board(array: np.ndarray, current_player: Cell = Cell.BLACK) -> Board:
    """
    Build a Board from an (8, 8) array of Cell values.

    This is the inverse of board_to_array().

    Args:
        array: numpy array of shape (8, 8) with values 0, 1 or 2
        current_player: Side to move on the new board

    Returns:
        Board

    Raises:
        ValueError: If the array has the wrong shape or an unknown value
    """
    if array.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(
            f"Invalid array shape: {array.shape}. Expected ({BOARD_SIZE}, {BOARD_SIZE})"
        )
    if current_player == Cell.EMPTY:
        raise ValueError("current_player must be Cell.BLACK or Cell.WHITE")

    board = Board()
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            try:
                board.grid[y][x] = Cell(int(array[y, x]))
            except ValueError:
                raise ValueError(f"Invalid cell value {array[y, x]} at ({x}, {y})")

    board.current_player = current_player
    return board


def board_from_diagram(diagram: str, current_player: Cell = Cell.BLACK) -> Board:
    """
    Parse a text diagram into a Board.

    Blank lines and whitespace between symbols are ignored, so both
    'B.W.....' and 'B . W . . . . .' are accepted.

    Raises:
        ValueError: If the diagram is not 8 rows of 8 known symbols
    """
    rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
    rows = [row for row in rows if row]

    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(f"Diagram must be {BOARD_SIZE} rows of {BOARD_SIZE} cells")

    array = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            if symbol not in SYMBOL_TO_CELL:
                raise ValueError(f"Unknown symbol {symbol!r} at ({x}, {y})")
            array[y, x] = SYMBOL_TO_CELL[symbol].value

    return array_to_board(array, current_player)
