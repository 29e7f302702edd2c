"""
Reversi game module.
Handles game flow and state management: legal moves, placements and passes.
"""
import logging
import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Set, FrozenSet, Dict, Any
import numpy as np
from .board import Board, Color, Position

logger = logging.getLogger(__name__)

DRAW = 0


class Phase(Enum):
    AWAITING_MOVE = "awaiting_move"
    TERMINAL = "terminal"


class RejectReason(Enum):
    """Why a placement or pass was refused. The game state is never modified."""
    OUT_OF_RANGE = "out of range"
    ALREADY_OCCUPIED = "already occupied"
    NO_FLIPS = "no discs to flip"
    HAS_LEGAL_MOVES = "a legal move is available"
    GAME_OVER = "game is over"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of place() or skip_turn()."""
    accepted: bool
    reason: Optional[RejectReason] = None
    position: Optional[Position] = None
    flipped: Tuple[Position, ...] = ()

    def __bool__(self) -> bool:
        return self.accepted


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    """Read-only view of the game handed to renderers after every transition."""
    cells: np.ndarray
    black: int
    white: int
    turn: Color
    phase: Phase
    winner: Optional[int]
    last_move: Optional[Position]
    legal_moves: FrozenSet[Position] = field(default_factory=frozenset)
    passes: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.phase is Phase.TERMINAL


class ReversiGame:
    """
    Main game class for Reversi that owns the board and enforces the rules.
    Black moves first from the standard four-disc opening.
    """

    def __init__(self):
        """Initialize a new Reversi game."""
        self.board = Board()
        self.current_player = Color.BLACK
        self.empty: Set[Position] = set(self.board.empty_positions())
        self.counts: Dict[Color, int] = {
            Color.BLACK: self.board.count(Color.BLACK),
            Color.WHITE: self.board.count(Color.WHITE),
        }
        self.passes = 0
        self.phase = Phase.AWAITING_MOVE
        self.winner: Optional[int] = None
        self.last_move: Optional[Position] = None
        self.move_history: List[Tuple[Optional[Position], Color]] = []

    @classmethod
    def from_board(cls, board: Board, current_player: Color = Color.BLACK) -> 'ReversiGame':
        """
        Start a game from an arbitrary position.

        Args:
            board: Board to play on (copied)
            current_player: The color to move next
        """
        game = cls()
        game.board = board.copy()
        game.current_player = current_player
        game.empty = set(game.board.empty_positions())
        game.counts = {
            Color.BLACK: game.board.count(Color.BLACK),
            Color.WHITE: game.board.count(Color.WHITE),
        }
        if not game.empty:
            game._finish("board full")
        return game

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.__init__()

    def get_valid_moves(self) -> Set[Position]:
        """
        Get all legal placements for the current player.

        Returns:
            Set of (x, y) positions; empty once the game is over
        """
        if self.phase is Phase.TERMINAL:
            return set()
        return {p for p in self.empty if self.board.has_flips(p, self.current_player)}

    def place(self, position: Any) -> MoveResult:
        """
        Place a disc for the current player and flip every bounded run.

        Args:
            position: (x, y) pair, 0-indexed

        Returns:
            MoveResult; on rejection the game state is left untouched
        """
        if self.phase is Phase.TERMINAL:
            return self._reject(RejectReason.GAME_OVER)

        try:
            x, y = map(operator.index, position)
        except (TypeError, ValueError):
            return self._reject(RejectReason.OUT_OF_RANGE)
        position = (x, y)

        if not Board.in_bounds(position):
            return self._reject(RejectReason.OUT_OF_RANGE, position)
        if position not in self.empty:
            return self._reject(RejectReason.ALREADY_OCCUPIED, position)

        player = self.current_player
        flipped = self.board.flips_for(position, player)
        if not flipped:
            return self._reject(RejectReason.NO_FLIPS, position)

        self.board.set(position, player)
        for p in flipped:
            self.board.set(p, player)
        self.empty.discard(position)
        self.counts[player] += 1 + len(flipped)
        self.counts[player.opposite] -= len(flipped)

        self.last_move = position
        self.move_history.append((position, player))
        self.passes = 0
        self.current_player = player.opposite
        logger.debug("%s placed at %s flipping %d", player.label, position, len(flipped))

        if not self.empty:
            self._finish("board full")

        return MoveResult(True, position=position, flipped=tuple(flipped))

    def skip_turn(self) -> MoveResult:
        """
        Pass the turn when the current player has no legal placement.
        Two passes in a row end the game.
        """
        if self.phase is Phase.TERMINAL:
            return self._reject(RejectReason.GAME_OVER)
        if self.get_valid_moves():
            return self._reject(RejectReason.HAS_LEGAL_MOVES)

        player = self.current_player
        self.passes += 1
        self.move_history.append((None, player))
        self.current_player = player.opposite
        logger.debug("%s passes (%d in a row)", player.label, self.passes)

        if self.passes >= 2:
            self._finish("both players passed")

        return MoveResult(True)

    def _reject(self, reason: RejectReason, position: Optional[Position] = None) -> MoveResult:
        logger.debug("Rejected %s for %s: %s", position, self.current_player.label, reason.value)
        return MoveResult(False, reason=reason, position=position)

    def _finish(self, cause: str) -> None:
        self.phase = Phase.TERMINAL
        self._determine_winner()
        black, white = self.get_score()
        logger.info("Game over (%s). Black: %d, White: %d", cause, black, white)

    def _determine_winner(self) -> None:
        """Determine the winner based on piece counts."""
        black, white = self.get_score()
        if black > white:
            self.winner = Color.BLACK
        elif white > black:
            self.winner = Color.WHITE
        else:
            self.winner = DRAW

    def is_game_over(self) -> bool:
        return self.phase is Phase.TERMINAL

    def get_winner(self) -> Optional[int]:
        """
        Get the winner of the game.

        Returns:
            Color.BLACK, Color.WHITE, or DRAW (0); None if the game is not over
        """
        return self.winner if self.is_game_over() else None

    def get_score(self) -> Tuple[int, int]:
        """Get the current disc counts as (black, white)."""
        return self.counts[Color.BLACK], self.counts[Color.WHITE]

    def get_current_player(self) -> Color:
        return self.current_player

    def get_board_state(self) -> np.ndarray:
        """Get a copy of the grid (indexed [y, x])."""
        return self.board.grid.copy()

    def get_move_history(self) -> List[Tuple[Optional[Position], Color]]:
        """Get placements in order; a None position records a pass."""
        return self.move_history.copy()

    def snapshot(self) -> GameSnapshot:
        """Build the renderable view of the current state."""
        cells = self.get_board_state()
        cells.flags.writeable = False
        black, white = self.get_score()
        return GameSnapshot(
            cells=cells,
            black=black,
            white=white,
            turn=self.current_player,
            phase=self.phase,
            winner=self.get_winner(),
            last_move=self.last_move,
            legal_moves=frozenset(self.get_valid_moves()),
            passes=self.passes,
        )

    def copy(self) -> 'ReversiGame':
        """Create a deep copy of the game."""
        new_game = ReversiGame.__new__(ReversiGame)
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.empty = set(self.empty)
        new_game.counts = dict(self.counts)
        new_game.passes = self.passes
        new_game.phase = self.phase
        new_game.winner = self.winner
        new_game.last_move = self.last_move
        new_game.move_history = self.move_history.copy()
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self.board),
                 f"Current player: {self.current_player.label}",
                 f"Score - Black: {black}, White: {white}"]
        if self.is_game_over():
            if self.winner == DRAW:
                lines.append("Game over! It's a draw!")
            else:
                lines.append(f"Game over! {Color(self.winner).label} wins!")
        return "\n".join(lines)
