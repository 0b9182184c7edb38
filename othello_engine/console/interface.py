"""
Console Command Interface

A line-based text front-end for the engine. It plays the role of the
presentation layer: it turns commands into Game events and prints what a
graphical front-end would draw.

Commands Supported:
    - play: Open mode selection from the menu
    - mode pvp | mode cpu: Start a two-player or vs-computer game
    - back: Return from mode selection to the menu
    - move X Y: Human move at column X, row Y (0-indexed)
    - go: Let the computer play when it is its turn
    - show: Print board, score and whose turn it is
    - menu: Abandon the game and return to the menu
    - quit: Exit

Example Session:
    > play
    > mode cpu
    > move 2 3
    (computer replies automatically)
    > show
"""

import sys
import argparse
from typing import List, Optional

from othello_engine.config import EngineConfig, setup_logger
from othello_engine.evaluation.base import Evaluator
from othello_engine.game.state import Game, GamePhase

PHASE_PROMPTS = {
    GamePhase.MENU: "OTHELLO - commands: play, quit",
    GamePhase.MODE_SELECTION: "Select Mode - commands: mode pvp, mode cpu, back",
    GamePhase.GAMEPLAY: "commands: move X Y, go, show, menu, quit",
}


class ConsoleInterface:
    """
    Text front-end driving a Game.

    Attributes:
        game: The Game being played
        config: Engine configuration
        running: False once 'quit' or EOF was seen
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, config: Optional[EngineConfig] = None):
        self.config = config if config else EngineConfig()
        self.logger = setup_logger(self.config)
        self.game = Game(evaluator=evaluator)
        self.running = True

        self.logger.info("=== Othello console started ===")

    def run(self):
        """
        Main command loop.

        Reads commands from stdin until 'quit' or EOF. A failing command is
        logged and reported on stderr; it never ends the loop.
        """
        self._say(PHASE_PROMPTS[self.game.phase])

        while self.running:
            try:
                command = input().strip()

                if not command:
                    continue

                self.logger.debug(f">>> {command}")
                self.dispatch(command.split())

            except EOFError:
                self.logger.info("EOF received, shutting down")
                break
            except Exception as e:
                self.logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

    def dispatch(self, tokens: List[str]):
        cmd = tokens[0].lower()

        if cmd == "play":
            self.handle_play()
        elif cmd == "mode":
            self.handle_mode(tokens)
        elif cmd == "back":
            self.handle_back()
        elif cmd == "move":
            self.handle_move(tokens)
        elif cmd == "go":
            self.handle_go()
        elif cmd == "show":
            self.handle_show()
        elif cmd == "menu":
            self.handle_menu()
        elif cmd == "quit":
            self.handle_quit()
        else:
            self.logger.debug(f"Unknown command ignored: {' '.join(tokens)}")
            print(f"# Unknown command: {tokens[0]}", file=sys.stderr)

    def handle_play(self):
        self.game.open_mode_selection()
        self._say(PHASE_PROMPTS[self.game.phase])

    def handle_mode(self, tokens: List[str]):
        """
        Handle 'mode pvp' / 'mode cpu'.

        Args:
            tokens: Command tokens (e.g., ['mode', 'cpu'])
        """
        if self.game.phase != GamePhase.MODE_SELECTION:
            self.logger.warning("mode command outside mode selection")
            print("# Choose 'play' first", file=sys.stderr)
            return

        if len(tokens) < 2 or tokens[1].lower() not in ("pvp", "cpu"):
            print("# Usage: mode pvp | mode cpu", file=sys.stderr)
            return

        self.game.select_mode(vs_computer=tokens[1].lower() == "cpu")
        self._say(PHASE_PROMPTS[self.game.phase])
        self.handle_show()

    def handle_back(self):
        self.game.back_to_menu()
        self._say(PHASE_PROMPTS[self.game.phase])

    def handle_move(self, tokens: List[str]):
        """
        Handle 'move X Y' - a human move.

        Illegal or off-board targets are ignored, exactly as a click on a
        wrong square would be. In vs-computer mode the computer's reply
        follows immediately.
        """
        if self.game.phase != GamePhase.GAMEPLAY:
            print("# No game in progress", file=sys.stderr)
            return

        try:
            x, y = int(tokens[1]), int(tokens[2])
        except (IndexError, ValueError):
            print("# Usage: move X Y", file=sys.stderr)
            return

        if self.game.is_computer_turn():
            print("# It is the computer's turn", file=sys.stderr)
            return

        if not self.game.handle_turn((x, y)):
            self.logger.info(f"Illegal move ignored: {x} {y}")
            return

        self._play_computer_turns()
        self.handle_show()

    def handle_go(self):
        """Handle 'go' - run the computer's turn(s) if it is to move."""
        if not self.game.is_computer_turn():
            print("# It is not the computer's turn", file=sys.stderr)
            return

        self._play_computer_turns()
        self.handle_show()

    def handle_show(self):
        """Print board, score line and turn label (or the result)."""
        self._say(str(self.game.board))
        self._say(self.game.score_line())

        if self.game.game_over:
            self._say("Game Over")
            self._say(self.game.result_message())
        else:
            self._say(self.game.turn_label())

    def handle_menu(self):
        self.game.reset_to_menu()
        self._say(PHASE_PROMPTS[self.game.phase])

    def handle_quit(self):
        self.logger.info("=== Othello console stopped ===")
        self.running = False

    def _play_computer_turns(self):
        # A human pass can hand the computer several moves in a row
        while self.game.is_computer_turn():
            if not self.game.handle_turn():
                break

    def _say(self, message: str):
        print(message)
        sys.stdout.flush()
        self.logger.debug(f"<<< {message}")


def main(argv: Optional[List[str]] = None):
    """Entry point: parse options and run the console."""
    parser = argparse.ArgumentParser(description="Play Othello in the terminal")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level"
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Write the log to ~/.othello_engine/engine.log"
    )
    args = parser.parse_args(argv)

    config = EngineConfig(debug=args.debug, log_to_file=args.log_file)
    ConsoleInterface(config=config).run()
