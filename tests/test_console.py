"""
Unit Tests for Console Interface

Tests for the text command front-end, focusing on:
    - Command dispatch: play, mode, back, move, go, show, menu, quit
    - Output: board diagram, score line, turn label, result
    - Error handling: bad arguments and unknown commands
"""

import pytest
from unittest.mock import patch

from othello_engine.board import Cell, board_from_diagram
from othello_engine.console import ConsoleInterface
from othello_engine.console.interface import main
from othello_engine.game import GamePhase


class TestConsoleCommands:
    """Tests for individual command handlers."""

    @pytest.fixture
    def console(self):
        return ConsoleInterface()

    def test_play_opens_mode_selection(self, console, capsys):
        console.dispatch(["play"])

        assert console.game.phase == GamePhase.MODE_SELECTION
        assert "Select Mode" in capsys.readouterr().out

    def test_back(self, console):
        console.dispatch(["play"])
        console.dispatch(["back"])

        assert console.game.phase == GamePhase.MENU

    def test_mode_requires_play_first(self, console, capsys):
        console.dispatch(["mode", "pvp"])

        assert console.game.phase == GamePhase.MENU
        assert "play" in capsys.readouterr().err

    def test_mode_bad_argument(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "online"])

        assert console.game.phase == GamePhase.MODE_SELECTION
        assert "Usage" in capsys.readouterr().err

    def test_mode_pvp_shows_board(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "pvp"])

        output = capsys.readouterr().out
        assert console.game.phase == GamePhase.GAMEPLAY
        assert ". . . W B . . ." in output
        assert "Black: 2 | White: 2" in output
        assert "Player 1's Turn" in output

    def test_move_in_pvp(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "pvp"])
        capsys.readouterr()

        console.dispatch(["move", "2", "3"])

        output = capsys.readouterr().out
        assert "Black: 4 | White: 1" in output
        assert "Player 2's Turn" in output

    def test_illegal_move_ignored(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "pvp"])
        capsys.readouterr()

        console.dispatch(["move", "0", "0"])

        assert console.game.disc_counts() == (2, 2)
        assert capsys.readouterr().out == ""

    def test_move_bad_arguments(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "pvp"])

        console.dispatch(["move", "a"])

        assert "Usage: move X Y" in capsys.readouterr().err
        assert console.game.disc_counts() == (2, 2)

    def test_move_without_game(self, console, capsys):
        console.dispatch(["move", "2", "3"])

        assert "No game in progress" in capsys.readouterr().err

    def test_computer_replies_after_move(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "cpu"])
        capsys.readouterr()

        console.dispatch(["move", "2", "3"])

        output = capsys.readouterr().out
        assert console.game.board.current_player == Cell.BLACK
        assert sum(console.game.disc_counts()) == 6
        assert "Your Turn" in output

    def test_go_when_not_computer_turn(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "cpu"])

        console.dispatch(["go"])

        assert "not the computer's turn" in capsys.readouterr().err

    def test_go_plays_computer_turn(self, console):
        console.dispatch(["play"])
        console.dispatch(["mode", "cpu"])
        console.game.board.place_piece(2, 3)

        console.dispatch(["go"])

        assert console.game.board.current_player == Cell.BLACK
        assert sum(console.game.disc_counts()) == 6

    def test_go_keeps_playing_while_human_is_stuck(self, console, capsys):
        """Black cannot answer White's first move, so White moves again."""
        console.dispatch(["play"])
        console.dispatch(["mode", "cpu"])
        console.game.board = board_from_diagram("""
            W B B . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            W B B . . . . .
        """, current_player=Cell.WHITE)
        capsys.readouterr()

        console.dispatch(["go"])

        output = capsys.readouterr().out
        assert not console.game.is_computer_turn()
        assert console.game.game_over
        assert console.game.disc_counts() == (0, 8)
        assert "Computer Won!" in output

    def test_game_over_shows_result(self, console, capsys):
        console.dispatch(["play"])
        console.dispatch(["mode", "pvp"])
        console.game.board = board_from_diagram("""
            B W W . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
        """)
        capsys.readouterr()

        console.dispatch(["move", "3", "0"])

        output = capsys.readouterr().out
        assert console.game.game_over
        assert "Game Over" in output
        assert "Player 1 Won!" in output

    def test_menu_resets(self, console):
        console.dispatch(["play"])
        console.dispatch(["mode", "pvp"])
        console.dispatch(["move", "2", "3"])

        console.dispatch(["menu"])

        assert console.game.phase == GamePhase.MENU
        assert console.game.disc_counts() == (2, 2)

    def test_unknown_command(self, console, capsys):
        console.dispatch(["castle"])

        assert "Unknown command" in capsys.readouterr().err

    def test_quit(self, console):
        console.dispatch(["quit"])

        assert not console.running


class TestConsoleLoop:
    """Tests for the main command loop."""

    def test_session_until_quit(self, capsys):
        console = ConsoleInterface()
        commands = ["play", "", "mode pvp", "move 2 3", "quit", "show"]

        with patch("builtins.input", side_effect=commands):
            console.run()

        output = capsys.readouterr().out
        assert "OTHELLO" in output
        assert "Black: 4 | White: 1" in output
        assert console.game.disc_counts() == (4, 1), "Commands after quit are not read"

    def test_eof_ends_loop(self):
        console = ConsoleInterface()

        with patch("builtins.input", side_effect=EOFError):
            console.run()

        assert console.game.phase == GamePhase.MENU

    def test_failing_command_does_not_stop_loop(self, capsys):
        console = ConsoleInterface()
        commands = ["play", "mode pvp", "show", "quit"]

        with patch.object(console, "handle_show", side_effect=[RuntimeError("boom"), None, None]):
            with patch("builtins.input", side_effect=commands):
                console.run()

        assert "# Error: boom" in capsys.readouterr().err
        assert not console.running

    def test_main_entry_point(self, capsys):
        with patch("builtins.input", side_effect=["play", "quit"]):
            main(["--debug"])

        assert "Select Mode" in capsys.readouterr().out
