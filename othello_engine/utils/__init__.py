"""
Utilities Module

Benchmarking helpers for the engine.

Key Components:
    - play_self_play_game: One computer-vs-computer game
    - run_self_play: A batch of games with a result tally and node counts
"""

from othello_engine.utils.benchmark import (
    SelfPlayResult,
    play_self_play_game,
    run_self_play,
)

__all__ = [
    'SelfPlayResult',
    'play_self_play_game',
    'run_self_play',
]
