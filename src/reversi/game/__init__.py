"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import Board, Color, Position, DIRECTIONS, EMPTY
from .game import ReversiGame, MoveResult, GameSnapshot, Phase, RejectReason, DRAW

__all__ = ['Board', 'Color', 'Position', 'DIRECTIONS', 'EMPTY',
           'ReversiGame', 'MoveResult', 'GameSnapshot', 'Phase', 'RejectReason', 'DRAW']
