"""
Board module for Reversi.
Handles the grid of discs and the direction scan used to find flips.
"""
from enum import IntEnum
from typing import List, Tuple, Optional
import numpy as np

Position = Tuple[int, int]  # (x, y) == (column, row)

EMPTY = 0


class Color(IntEnum):
    """Disc color. Values double as the cell values stored in the grid."""
    BLACK = 1
    WHITE = 2

    @property
    def opposite(self) -> 'Color':
        return Color(3 - self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Directions as (dx, dy): E, W, S, N, SE, NW, SW, NE
DIRECTIONS: List[Tuple[int, int]] = [
    (1, 0),    # East
    (-1, 0),   # West
    (0, 1),    # South
    (0, -1),   # North
    (1, 1),    # South-East
    (-1, -1),  # North-West
    (-1, 1),   # South-West
    (1, -1)    # North-East
]


class Board:
    """
    Represents the Reversi game board as a fixed 8x8 numpy array.
    Cells hold EMPTY, Color.BLACK or Color.WHITE and are indexed grid[y, x].
    """

    SIZE = 8

    def __init__(self):
        """Initialize a board in the standard opening position."""
        self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        mid = self.SIZE // 2
        self.set((mid - 1, mid - 1), Color.WHITE)
        self.set((mid, mid), Color.WHITE)
        self.set((mid, mid - 1), Color.BLACK)
        self.set((mid - 1, mid), Color.BLACK)

    def clear(self) -> None:
        """Remove every disc from the board."""
        self.grid.fill(EMPTY)

    @classmethod
    def in_bounds(cls, position: Position) -> bool:
        x, y = position
        return 0 <= x < cls.SIZE and 0 <= y < cls.SIZE

    def _index(self, position: Position) -> Tuple[int, int]:
        if not self.in_bounds(position):
            raise IndexError(f"Position {position} is off the board")
        x, y = position
        return y, x

    def get(self, position: Position) -> Optional[Color]:
        """Return the color at a position, or None if the cell is empty."""
        value = self.grid[self._index(position)]
        return Color(int(value)) if value != EMPTY else None

    def set(self, position: Position, color: Color) -> None:
        self.grid[self._index(position)] = int(color)

    def count(self, color: Color) -> int:
        return int(np.count_nonzero(self.grid == int(color)))

    def empty_positions(self) -> List[Position]:
        ys, xs = np.nonzero(self.grid == EMPTY)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def is_full(self) -> bool:
        return not np.any(self.grid == EMPTY)

    def scan_direction(self, origin: Position, color: Color,
                       direction: Tuple[int, int]) -> List[Position]:
        """
        Walk from origin along direction collecting opponent discs.

        Args:
            origin: The cell the disc is (or would be) placed on
            color: The mover's color
            direction: (dx, dy) step vector

        Returns:
            The collected run if it is closed by a disc of the mover's color,
            otherwise an empty list (run hits an empty cell or the edge).
        """
        dx, dy = direction
        mover, opponent = int(color), int(color.opposite)
        x, y = origin[0] + dx, origin[1] + dy
        run = []
        while 0 <= x < self.SIZE and 0 <= y < self.SIZE:
            cell = self.grid[y, x]
            if cell == opponent:
                run.append((x, y))
            elif cell == mover:
                return run
            else:
                break
            x += dx
            y += dy
        return []

    def flips_for(self, origin: Position, color: Color) -> List[Position]:
        """Get every disc that placing color at origin would flip."""
        flipped = []
        for direction in DIRECTIONS:
            flipped.extend(self.scan_direction(origin, color, direction))
        return flipped

    def has_flips(self, origin: Position, color: Color) -> bool:
        return any(self.scan_direction(origin, color, d) for d in DIRECTIONS)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {EMPTY: '.', Color.BLACK: 'B', Color.WHITE: 'W'}
        rows = []
        for y in range(self.SIZE):
            rows.append(' '.join(symbols[int(self.grid[y, x])] for x in range(self.SIZE)))
        return "\n".join(rows)
