"""
Main entry point for playing Othello in the terminal.

Usage:
    python -m othello_engine.console [--debug] [--log-file]
"""

from othello_engine.console.interface import main

if __name__ == "__main__":
    main()
