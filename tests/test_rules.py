"""
Unit Tests for Move Rules

Tests for the pure rule functions, focusing on:
    - Bounds checking
    - Directional capture detection and application
    - Zero-length captures and occupied targets
    - Legality soundness against a brute-force reference
    - Colour-explicit mobility queries
"""

import pytest
from othello_engine.board import Board, Cell, board_from_diagram
from othello_engine.board import rules


def reference_is_legal(grid, x, y, color):
    """Straightforward legality check used as an oracle."""
    if grid[y][x] != Cell.EMPTY:
        return False
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            crossed = 0
            cx, cy = x + dx, y + dy
            while 0 <= cx < 8 and 0 <= cy < 8:
                if grid[cy][cx] == color.opponent:
                    crossed += 1
                elif grid[cy][cx] == color:
                    if crossed:
                        return True
                    break
                else:
                    break
                cx += dx
                cy += dy
    return False


def play_first_moves(plies):
    """Play the first legal move `plies` times, passing when stuck."""
    board = Board()
    for _ in range(plies):
        moves = board.legal_moves()
        if not moves:
            if not board.has_any_legal_move(board.current_player.opponent):
                break
            board.pass_turn()
            continue
        board.place_piece(*moves[0])
    return board


class TestBounds:

    @pytest.mark.parametrize("x,y", [(0, 0), (7, 7), (0, 7), (3, 4)])
    def test_inside(self, x, y):
        assert rules.is_within_bounds(x, y)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)])
    def test_outside(self, x, y):
        assert not rules.is_within_bounds(x, y)

    def test_eight_directions(self):
        assert len(rules.DIRECTIONS) == 8
        assert (0, 0) not in rules.DIRECTIONS
        assert len(set(rules.DIRECTIONS)) == 8


class TestCanFlipInDirection:
    """Tests for single-direction capture scanning."""

    def test_valid_line_without_apply(self):
        board = Board()

        assert rules.can_flip_in_direction(board.grid, 2, 3, 1, 0, Cell.BLACK)
        assert board.grid[3][3] == Cell.WHITE, "Query must not flip"

    def test_valid_line_with_apply(self):
        board = Board()

        assert rules.can_flip_in_direction(board.grid, 2, 3, 1, 0, Cell.BLACK, apply=True)
        assert board.grid[3][3] == Cell.BLACK

    def test_no_opponent_disc_in_line(self):
        board = Board()

        assert not rules.can_flip_in_direction(board.grid, 2, 3, -1, 0, Cell.BLACK)

    def test_run_ending_off_board(self):
        """A run of opponent discs reaching the edge does not capture."""
        board = board_from_diagram("""
            W W W W . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
        """)

        assert not rules.can_flip_in_direction(board.grid, 4, 0, -1, 0, Cell.BLACK)

    def test_run_ending_on_empty(self):
        board = board_from_diagram("""
            . W W . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
        """)

        assert not rules.can_flip_in_direction(board.grid, 3, 0, -1, 0, Cell.BLACK)

    def test_long_run_is_flipped_entirely(self):
        board = board_from_diagram("""
            B W W W W W . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
        """)

        assert rules.can_flip_in_direction(board.grid, 6, 0, -1, 0, Cell.BLACK, apply=True)
        assert all(board.grid[0][x] == Cell.BLACK for x in range(1, 6))


class TestLegality:
    """Tests for is_legal_move and related queries."""

    def test_zero_length_capture_is_illegal(self):
        """(5,3) touches Black's own disc at (4,3) but crosses no White disc."""
        board = Board()

        assert not rules.is_legal_move(board.grid, 5, 3, Cell.BLACK)

    def test_occupied_square_is_illegal(self):
        board = Board()

        for x, y in [(3, 3), (4, 3), (3, 4), (4, 4)]:
            assert not rules.is_legal_move(board.grid, x, y, Cell.BLACK)
            assert not rules.is_legal_move(board.grid, x, y, Cell.WHITE)

    def test_out_of_bounds_is_illegal(self):
        board = Board()

        assert not rules.is_legal_move(board.grid, -1, 3, Cell.BLACK)
        assert not rules.is_legal_move(board.grid, 3, 8, Cell.BLACK)

    def test_is_legal_move_does_not_mutate(self):
        board = Board()
        before = board.clone()

        for y in range(8):
            for x in range(8):
                rules.is_legal_move(board.grid, x, y, Cell.BLACK)
                rules.is_legal_move(board.grid, x, y, Cell.WHITE)

        assert board == before

    @pytest.mark.parametrize("plies", [0, 3, 8, 15, 25])
    def test_soundness_against_reference(self, plies):
        board = play_first_moves(plies)

        for color in (Cell.BLACK, Cell.WHITE):
            for y in range(8):
                for x in range(8):
                    assert rules.is_legal_move(board.grid, x, y, color) == reference_is_legal(
                        board.grid, x, y, color
                    ), f"Mismatch at ({x},{y}) for {color.name} after {plies} plies"

    def test_flips_for_move(self):
        board = Board()

        assert rules.flips_for_move(board.grid, 2, 3, Cell.BLACK) == [(3, 3)]
        assert rules.flips_for_move(board.grid, 0, 0, Cell.BLACK) == []

    def test_apply_flips_returns_count(self):
        board = Board()

        assert rules.apply_flips(board.grid, 2, 3, Cell.BLACK) == 1
        assert board.grid[3][3] == Cell.BLACK
        assert board.grid[3][2] == Cell.EMPTY

    def test_apply_flips_illegal_leaves_grid(self):
        board = Board()
        before = board.clone()

        assert rules.apply_flips(board.grid, 0, 0, Cell.BLACK) == 0
        assert board == before


class TestMobility:
    """Tests for colour-explicit mobility queries."""

    def test_both_sides_can_move_at_start(self):
        board = Board()

        assert rules.has_any_legal_move(board.grid, Cell.BLACK)
        assert rules.has_any_legal_move(board.grid, Cell.WHITE)

    def test_single_colour_board_has_no_moves(self):
        board = board_from_diagram("""
            B . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
        """)

        assert not rules.has_any_legal_move(board.grid, Cell.BLACK)
        assert not rules.has_any_legal_move(board.grid, Cell.WHITE)

    def test_one_sided_mobility(self):
        board = board_from_diagram("""
            B W W . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
        """)

        assert rules.has_any_legal_move(board.grid, Cell.BLACK)
        assert not rules.has_any_legal_move(board.grid, Cell.WHITE)
        assert rules.legal_moves(board.grid, Cell.BLACK) == [(3, 0)]

    def test_legal_moves_row_major(self):
        board = play_first_moves(6)

        moves = rules.legal_moves(board.grid, board.current_player)
        assert moves == sorted(moves, key=lambda m: (m[1], m[0]))


class TestCell:

    def test_opponent(self):
        assert Cell.BLACK.opponent == Cell.WHITE
        assert Cell.WHITE.opponent == Cell.BLACK

    def test_empty_has_no_opponent(self):
        with pytest.raises(ValueError):
            Cell.EMPTY.opponent
