"""
Move Rules

Pure functions that decide legality and perform captures on a grid
snapshot. Nothing in here knows whose turn it is: the acting colour is
always passed in explicitly, so mobility for either side can be queried
without touching the board's turn state.

Grid Convention:
    - grid[y][x], row-major
    - x = column (0-7, left to right)
    - y = row (0-7, top to bottom)

Capture Rule:
    Starting one step away from the placed disc, walk in a direction while
    the cells hold the opponent's colour. The direction captures iff the
    walk ends, still on the board, on a disc of the mover's colour AND at
    least one opponent disc was crossed.
"""

from typing import List, Tuple

from othello_engine.board.cells import BOARD_SIZE, Cell, Grid

# All 8 unit vectors, scanned dy-major (top row of neighbours first)
DIRECTIONS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def is_within_bounds(x: int, y: int) -> bool:
    """Return True iff (x, y) lies on the 8x8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def can_flip_in_direction(
    grid: Grid,
    x: int,
    y: int,
    dx: int,
    dy: int,
    color: Cell,
    apply: bool = False,
) -> bool:
    """
    Check (and optionally perform) a capture along one direction.

    Args:
        grid: Board grid, indexed grid[y][x]
        x: Column of the placed disc
        y: Row of the placed disc
        dx: Column step (-1, 0 or 1)
        dy: Row step (-1, 0 or 1)
        color: Colour of the mover
        apply: If True, overwrite the captured run with ``color``

    Returns:
        bool: True if this direction is a valid capture line
    """
    opponent = color.opponent
    cx, cy = x + dx, y + dy
    count = 0

    while is_within_bounds(cx, cy) and grid[cy][cx] == opponent:
        cx += dx
        cy += dy
        count += 1

    if count > 0 and is_within_bounds(cx, cy) and grid[cy][cx] == color:
        if apply:
            for i in range(1, count + 1):
                grid[y + i * dy][x + i * dx] = color
        return True

    return False


def is_legal_move(grid: Grid, x: int, y: int, color: Cell) -> bool:
    """
    Read-only legality check.

    A move is legal iff the target is on the board, empty, and at least one
    of the 8 directions is a capture line. The grid is never modified.
    """
    if not is_within_bounds(x, y) or grid[y][x] != Cell.EMPTY:
        return False

    return any(
        can_flip_in_direction(grid, x, y, dx, dy, color)
        for dx, dy in DIRECTIONS
    )


def flips_for_move(grid: Grid, x: int, y: int, color: Cell) -> List[Tuple[int, int]]:
    """
    List the discs that placing ``color`` at (x, y) would flip.

    Returns:
        List of (x, y) coordinates, empty if the move is illegal
    """
    if not is_within_bounds(x, y) or grid[y][x] != Cell.EMPTY:
        return []

    flipped = []
    for dx, dy in DIRECTIONS:
        if not can_flip_in_direction(grid, x, y, dx, dy, color):
            continue
        cx, cy = x + dx, y + dy
        while grid[cy][cx] != color:
            flipped.append((cx, cy))
            cx += dx
            cy += dy
    return flipped


def apply_flips(grid: Grid, x: int, y: int, color: Cell) -> int:
    """
    Flip every captured run for a disc of ``color`` placed at (x, y).

    The target cell itself is NOT written; that is the caller's job
    (see Board.place_piece). Illegal moves leave the grid untouched.

    Returns:
        int: Number of discs flipped (0 if the move is illegal)
    """
    flipped = flips_for_move(grid, x, y, color)
    for fx, fy in flipped:
        grid[fy][fx] = color
    return len(flipped)


def legal_moves(grid: Grid, color: Cell) -> List[Tuple[int, int]]:
    """All legal moves for ``color`` in row-major order (y outer, x inner)."""
    return [
        (x, y)
        for y in range(BOARD_SIZE)
        for x in range(BOARD_SIZE)
        if grid[y][x] == Cell.EMPTY and is_legal_move(grid, x, y, color)
    ]


def has_any_legal_move(grid: Grid, color: Cell) -> bool:
    """True if ``color`` has at least one legal move on this grid."""
    return any(
        is_legal_move(grid, x, y, color)
        for y in range(BOARD_SIZE)
        for x in range(BOARD_SIZE)
        if grid[y][x] == Cell.EMPTY
    )
