"""
Othello Engine

An Othello (Reversi) game engine: board and rules, game lifecycle with
pass and end-of-game handling, and a minimax computer opponent.

## Architecture

The engine is organized into several key modules:

1. **board**: Board state and rules
   - 8x8 grid plus side to move, clone() for look-ahead
   - Pure legality, capture and mobility functions

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - PositionalEvaluator: fixed square-weight table

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning, fixed depth
   - choose_move(): root search for the side to move

4. **game**: Game lifecycle
   - Menu / mode selection / gameplay phases
   - Human and computer roles, passes, final result

5. **console**: Text front-end
   - Line commands on stdin, board and messages on stdout

## Quick Start

### As a Python Library

```python
from othello_engine.board import Board
from othello_engine.search import choose_move

board = Board()
move, score, nodes = choose_move(board)
board.place_piece(*move)
```

### In the Terminal

```bash
python -m othello_engine.console
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from othello_engine.board import Board, Cell
from othello_engine.evaluation import Evaluator, PositionalEvaluator
from othello_engine.game import Game, GamePhase, GameResult, PlayerKind
from othello_engine.search import SEARCH_DEPTH, choose_move, minimax

__all__ = [
    'Board',
    'Cell',
    'Evaluator',
    'PositionalEvaluator',
    'choose_move',
    'minimax',
    'SEARCH_DEPTH',
    'Game',
    'GamePhase',
    'GameResult',
    'PlayerKind',
]
