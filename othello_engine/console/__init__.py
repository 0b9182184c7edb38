"""
Console Interface

Line-based text front-end that drives a Game from stdin/stdout. It stands
in for a graphical presentation layer: it forwards menu choices and moves
to the engine and prints the board, score, turn label and result.

Protocol Flow:
    User → "play"
    User → "mode cpu"
    User → "move 2 3"
    Console → board diagram, "Black: 4 | White: 1", "Computer's Turn"
    Console → computer reply, "Your Turn"
"""

from othello_engine.console.interface import ConsoleInterface

__all__ = ['ConsoleInterface']
