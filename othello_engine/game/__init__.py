"""
Game Module

Game lifecycle on top of the board and search: phases, player roles,
turn dispatch, pass handling and final result.

Key Components:
    - Game: Owns the live Board, phase, roles and result
    - GamePhase: MENU / MODE_SELECTION / GAMEPLAY
    - GameResult: NONE / BLACK_WINS / WHITE_WINS / DRAW
    - PlayerKind: HUMAN / COMPUTER
"""

from othello_engine.game.state import (
    Game,
    GamePhase,
    GameResult,
    PlayerKind,
    classify_result,
)

__all__ = ['Game', 'GamePhase', 'GameResult', 'PlayerKind', 'classify_result']
