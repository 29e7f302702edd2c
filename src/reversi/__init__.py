"""
Reversi rules engine and console game loop.
"""
from .game import ReversiGame, Board, Color, RejectReason, Phase

__version__ = "0.1"

__all__ = ['ReversiGame', 'Board', 'Color', 'RejectReason', 'Phase']
