"""
Arena module for playing Reversi at the console.
"""
from .arena import Arena
from .console import ConsoleInput, InvalidCoordinate, parse_coordinate, render_snapshot

__all__ = ['Arena', 'ConsoleInput', 'InvalidCoordinate', 'parse_coordinate', 'render_snapshot']
