"""
Game State Machine

Tracks the application phase, which side is human or computer, and the
end-of-game result. The presentation layer drives it with button events
(open_mode_selection, select_mode, reset_to_menu) and one handle_turn()
call per frame.

Phase Flow:
    MENU → MODE_SELECTION → GAMEPLAY → ... → MENU (reset_to_menu)
                 ↑______ back_to_menu ______|

Turn Protocol (handle_turn):
    1. Active colour = board.current_player
    2. HUMAN: play the supplied target if it is legal, ignore it otherwise
       COMPUTER: ask choose_move() and play its answer, pass if none
    3. check_game_over(): finish, skip a stuck side, or carry on
"""

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from othello_engine.board.board import Board
from othello_engine.board.cells import Cell
from othello_engine.evaluation.base import Evaluator
from othello_engine.search.minimax import choose_move

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    MENU = 0
    MODE_SELECTION = 1
    GAMEPLAY = 2


class GameResult(Enum):
    NONE = 0
    BLACK_WINS = 1
    WHITE_WINS = 2
    DRAW = 3


class PlayerKind(Enum):
    """Who picks the moves for a colour."""
    HUMAN = "human"
    COMPUTER = "computer"


def classify_result(black_count: int, white_count: int) -> GameResult:
    """Final result by disc count only."""
    if black_count > white_count:
        return GameResult.BLACK_WINS
    if white_count > black_count:
        return GameResult.WHITE_WINS
    return GameResult.DRAW


def _is_cell_pair(target) -> bool:
    return (
        isinstance(target, tuple)
        and len(target) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in target)
    )


class Game:
    """
    Top-level game object owned by the presentation layer.

    Attributes:
        board: Live board
        phase: Current GamePhase
        players: PlayerKind for Cell.BLACK and Cell.WHITE (empty outside play)
        vs_computer: True when White is computer-controlled
        game_over: Set once neither side can move
        result: GameResult, NONE until game_over
        evaluator: Optional evaluator handed to the search
    """

    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.board = Board()
        self.phase = GamePhase.MENU
        self.players: Dict[Cell, PlayerKind] = {}
        self.vs_computer = False
        self.game_over = False
        self.result = GameResult.NONE
        self.evaluator = evaluator

    # ------------------------------------------------------------------
    # Phase transitions
    # ------------------------------------------------------------------

    def open_mode_selection(self) -> None:
        """'Play' pressed on the main menu."""
        if self.phase == GamePhase.MENU:
            self.phase = GamePhase.MODE_SELECTION

    def back_to_menu(self) -> None:
        """'Back' pressed on the mode selection screen."""
        if self.phase == GamePhase.MODE_SELECTION:
            self.phase = GamePhase.MENU

    def select_mode(self, vs_computer: bool) -> None:
        """
        Assign player roles and enter gameplay.

        Black is always human. White is human in two-player mode and the
        computer in vs-computer mode.
        """
        self.vs_computer = vs_computer
        self.players = {
            Cell.BLACK: PlayerKind.HUMAN,
            Cell.WHITE: PlayerKind.COMPUTER if vs_computer else PlayerKind.HUMAN,
        }
        self.phase = GamePhase.GAMEPLAY
        logger.info("Mode selected: %s", "vs computer" if vs_computer else "two players")

    def reset_to_menu(self) -> None:
        """Throw the current game away and return to the main menu."""
        self.board = Board()
        self.game_over = False
        self.result = GameResult.NONE
        self.players = {}
        self.phase = GamePhase.MENU
        logger.info("Game reset, back to menu")

    # ------------------------------------------------------------------
    # Turn handling
    # ------------------------------------------------------------------

    def active_player(self) -> Optional[PlayerKind]:
        """Role of the side to move, None outside gameplay."""
        return self.players.get(self.board.current_player)

    def is_computer_turn(self) -> bool:
        return (
            self.phase == GamePhase.GAMEPLAY
            and not self.game_over
            and self.active_player() == PlayerKind.COMPUTER
        )

    def handle_turn(self, target: Optional[Tuple[int, int]] = None) -> bool:
        """
        Run one turn for the side to move.

        Args:
            target: (x, y) cell chosen by a human; ignored for the computer.
                Anything that is not a pair of integers is ignored like an
                illegal move.

        Returns:
            bool: True if a disc was placed
        """
        if self.phase != GamePhase.GAMEPLAY or self.game_over:
            return False

        kind = self.active_player()
        placed = False

        if kind == PlayerKind.HUMAN:
            if target is None:
                return False
            if _is_cell_pair(target) and self.board.is_legal_move(*target):
                placed = self.board.place_piece(*target)
            else:
                logger.debug(
                    "Ignoring illegal move %r for %s", target, self.board.current_player.name
                )

        elif kind == PlayerKind.COMPUTER:
            move, score, nodes = choose_move(self.board, self.evaluator)
            if move is not None:
                placed = self.board.place_piece(*move)
                logger.debug("Computer played %s (score=%s, nodes=%d)", move, score, nodes)
            else:
                logger.info("Computer has no legal move and passes")

        self.check_game_over()
        return placed

    def check_game_over(self) -> None:
        """
        Decide between continue, skip-turn and game over.

        Neither side can move → game over, result by disc count.
        Only the side to move is stuck → its turn is skipped.
        """
        black_can_move = self.board.has_any_legal_move(Cell.BLACK)
        white_can_move = self.board.has_any_legal_move(Cell.WHITE)

        if not black_can_move and not white_can_move:
            black_count, white_count = self.board.disc_counts()
            self.game_over = True
            self.result = classify_result(black_count, white_count)
            logger.info(
                "Game over: %s (Black %d, White %d)", self.result.name, black_count, white_count
            )
            return

        to_move = self.board.current_player
        can_move = black_can_move if to_move == Cell.BLACK else white_can_move
        if not can_move:
            logger.info("%s has no legal move, turn skipped", to_move.name)
            self.board.pass_turn()

    # ------------------------------------------------------------------
    # Presentation queries
    # ------------------------------------------------------------------

    def disc_counts(self) -> Tuple[int, int]:
        return self.board.disc_counts()

    def score_line(self) -> str:
        black, white = self.disc_counts()
        return f"Black: {black} | White: {white}"

    def turn_label(self) -> str:
        """Whose-turn text, empty once the game is over."""
        if self.game_over:
            return ""
        black_to_move = self.board.current_player == Cell.BLACK
        if self.vs_computer:
            return "Your Turn" if black_to_move else "Computer's Turn"
        return "Player 1's Turn" if black_to_move else "Player 2's Turn"

    def result_message(self) -> str:
        """End-of-game text, empty while the game is running."""
        if self.result == GameResult.BLACK_WINS:
            return "You Won!" if self.vs_computer else "Player 1 Won!"
        if self.result == GameResult.WHITE_WINS:
            return "Computer Won!" if self.vs_computer else "Player 2 Won!"
        if self.result == GameResult.DRAW:
            return "It's a Draw!"
        return ""
