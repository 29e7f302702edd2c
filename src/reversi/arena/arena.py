"""
Arena for running a Reversi game between two players at the console.
"""
import logging
from typing import Callable, Optional

from ..config import Config, get_default_config
from ..game import Color, Position, ReversiGame
from ..logger import Logger
from .console import ConsoleInput, InvalidCoordinate, render_snapshot

logger = logging.getLogger(__name__)

MoveSource = Callable[[Color], Optional[Position]]


class Arena:
    """Drives one game: asks for moves, applies them and renders every transition."""

    def __init__(self, config: Optional[Config] = None,
                 read_move: Optional[MoveSource] = None,
                 write: Callable[[str], None] = print,
                 game_logger: Optional[Logger] = None):
        """
        Initialize the arena.

        Args:
            config: Configuration object (default: get_default_config())
            read_move: Returns the next (x, y) for a player, or None to quit.
                May raise InvalidCoordinate for unreadable input.
            write: Receives every rendered board and status message
            game_logger: Optional Logger used to record per-move metrics
        """
        self.config = config or get_default_config()
        self.read_move = read_move or ConsoleInput(self.config.arena)
        self.write = write
        self.game_logger = game_logger
        self.game: Optional[ReversiGame] = None
        self.quit = False

    def play(self, game: Optional[ReversiGame] = None) -> ReversiGame:
        """
        Play a game until it is over or a player quits.

        Args:
            game: Game to continue (default: a new game from the opening)

        Returns:
            The final game
        """
        game = game or ReversiGame()
        self.game = game
        self.quit = False
        self._show()

        while not game.is_game_over():
            player = game.current_player

            if not game.get_valid_moves():
                game.skip_turn()
                self.write(f"{player.label} has no legal move and passes.")
                self._show()
                continue

            try:
                position = self.read_move(player)
            except InvalidCoordinate as e:
                self.write(str(e))
                continue

            if position is None:
                self.quit = True
                self.write("Game quit.")
                logger.info("%s quit after %d moves", player.label, len(game.move_history))
                return game

            result = game.place(position)
            if not result:
                self.write(f"Cannot place at {position}: {result.reason.value}.")
                continue

            self._log_move(game, result.flipped)
            self._show()

        return game

    def _show(self):
        self.write(render_snapshot(self.game.snapshot(), self.config.display))

    def _log_move(self, game: ReversiGame, flipped):
        if self.game_logger is None:
            return
        black, white = game.get_score()
        self.game_logger.log_metrics({
            'position': game.last_move,
            'flipped': len(flipped),
            'black': black,
            'white': white,
        }, len(game.move_history))
