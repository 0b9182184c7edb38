"""
Othello Board

The Board owns the 8x8 grid and the colour whose turn it is. All rule
logic lives in othello_engine.board.rules; this class binds those pure
functions to its own grid and current player.

Lifecycle:
    - Created fresh at game start (centre cross seeded, Black to move)
    - Mutated only by place_piece() (and pass_turn() for skipped turns)
    - clone() gives a fully independent copy for search look-ahead

Initial Position:
    . . . . . . . .
    . . . . . . . .
    . . . . . . . .
    . . . W B . . .
    . . . B W . . .
    . . . . . . . .
    . . . . . . . .
    . . . . . . . .
"""

from typing import List, Optional, Tuple

from othello_engine.board import rules
from othello_engine.board.cells import BOARD_SIZE, Cell, Grid


class Board:
    """
    8x8 Othello board with side to move.

    Attributes:
        grid: Row-major grid of Cell values, indexed grid[y][x]
        current_player: Cell.BLACK or Cell.WHITE
    """

    def __init__(self):
        self.current_player = Cell.BLACK
        self.grid: Grid = []
        self.initialize()

    def initialize(self) -> None:
        """Reset to the standard starting position."""
        self.grid = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

        self.grid[3][3] = Cell.WHITE
        self.grid[3][4] = Cell.BLACK
        self.grid[4][3] = Cell.BLACK
        self.grid[4][4] = Cell.WHITE

        self.current_player = Cell.BLACK

    @staticmethod
    def is_within_bounds(x: int, y: int) -> bool:
        return rules.is_within_bounds(x, y)

    def can_place(self, x: int, y: int, apply: bool = False) -> bool:
        """
        Legality check for the side to move, optionally performing flips.

        Kept for callers that think in terms of a single query/mutate call.
        With apply=False this is is_legal_move(); with apply=True the
        captured runs are flipped but the target cell and turn are left
        alone. Prefer is_legal_move() / place_piece().
        """
        if apply:
            return rules.apply_flips(self.grid, x, y, self.current_player) > 0
        return self.is_legal_move(x, y)

    def is_legal_move(self, x: int, y: int, color: Optional[Cell] = None) -> bool:
        """
        Read-only legality check.

        Args:
            x: Column (0-7)
            y: Row (0-7)
            color: Acting colour (default: current player)
        """
        color = self.current_player if color is None else color
        return rules.is_legal_move(self.grid, x, y, color)

    def place_piece(self, x: int, y: int) -> bool:
        """
        Play a disc for the side to move.

        If the move is legal, flips every captured run, sets (x, y) to the
        mover's colour and hands the turn to the opponent. Illegal moves
        are a silent no-op.

        Returns:
            bool: True if the disc was placed
        """
        if not rules.is_legal_move(self.grid, x, y, self.current_player):
            return False

        rules.apply_flips(self.grid, x, y, self.current_player)
        self.grid[y][x] = self.current_player
        self.current_player = self.current_player.opponent
        return True

    def pass_turn(self) -> None:
        """Hand the move to the opponent without placing a disc."""
        self.current_player = self.current_player.opponent

    def has_any_legal_move(self, color: Cell) -> bool:
        """Mobility query for an arbitrary colour; never touches current_player."""
        return rules.has_any_legal_move(self.grid, color)

    def legal_moves(self, color: Optional[Cell] = None) -> List[Tuple[int, int]]:
        """Legal (x, y) moves in row-major order (default: side to move)."""
        color = self.current_player if color is None else color
        return rules.legal_moves(self.grid, color)

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self.grid)

    def disc_counts(self) -> Tuple[int, int]:
        """Return (black_count, white_count)."""
        return self.count(Cell.BLACK), self.count(Cell.WHITE)

    def clone(self) -> "Board":
        """Deep copy of the grid and current player."""
        copy = Board.__new__(Board)
        copy.grid = [row[:] for row in self.grid]
        copy.current_player = self.current_player
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid and self.current_player == other.current_player

    def __str__(self) -> str:
        """Text diagram, one row per line, e.g. '. . . W B . . .'."""
        return "\n".join(" ".join(cell.symbol for cell in row) for row in self.grid)

    def __repr__(self) -> str:
        black, white = self.disc_counts()
        return (
            f"Board(black={black}, white={white}, "
            f"to_move={self.current_player.name})"
        )
