"""
Console input and output for the Reversi arena.
"""
import re
from typing import Callable, Optional

from ..config import ArenaConfig, DisplayConfig
from ..game import Board, Color, GameSnapshot, Position, DRAW

_SEPARATOR = re.compile(r"[\s,]+")


class InvalidCoordinate(ValueError):
    """Typed text that is not a coordinate pair."""


def parse_coordinate(text: str, quit_command: str = "q") -> Optional[Position]:
    """
    Parse a typed coordinate such as "2 3" or "2,3" into (x, y).

    Values outside the board are returned unchanged; the game rejects them.

    Returns:
        The position, or None when the player typed the quit command

    Raises:
        InvalidCoordinate: if the text is not two integers
    """
    text = text.strip()
    if text.lower() == quit_command.lower():
        return None
    parts = [p for p in _SEPARATOR.split(text) if p]
    if len(parts) != 2:
        raise InvalidCoordinate(f"Expected two numbers 'x y', got {text!r}")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidCoordinate(f"Coordinates must be integers, got {text!r}") from None
    return x, y


class ConsoleInput:
    """Reads one coordinate per call from a prompt function (input() by default)."""

    def __init__(self, config: Optional[ArenaConfig] = None,
                 read: Callable[[str], str] = input):
        self.config = config or ArenaConfig()
        self.read = read
        # A malformed prompt template fails here rather than mid-game
        self.prompts = {color: self.config.prompt.format(player=color.label) for color in Color}

    def __call__(self, player: Color) -> Optional[Position]:
        try:
            raw = self.read(self.prompts[player])
        except EOFError:
            return None
        return parse_coordinate(raw, self.config.quit_command)


def render_snapshot(snapshot: GameSnapshot, config: Optional[DisplayConfig] = None) -> str:
    """Render a snapshot as a bordered text grid followed by the game status."""
    config = config or DisplayConfig()
    symbols = {
        int(Color.BLACK): config.black_symbol,
        int(Color.WHITE): config.white_symbol,
    }
    margin = "  " if config.show_coordinates else ""
    rule = margin + "-" * (Board.SIZE * 4 + 1)

    lines = []
    if config.show_coordinates:
        lines.append(margin + "".join(f"  {x} " for x in range(Board.SIZE)))
    for y in range(Board.SIZE):
        lines.append(rule)
        row = f"{y} " if config.show_coordinates else ""
        for x in range(Board.SIZE):
            symbol = symbols.get(int(snapshot.cells[y, x]), config.empty_symbol)
            if config.show_legal_moves and (x, y) in snapshot.legal_moves:
                symbol = config.legal_move_symbol
            row += f"| {symbol} "
        lines.append(row + "|")
    lines.append(rule)

    lines.append(f"Black: {snapshot.black}  White: {snapshot.white}")
    if snapshot.is_terminal:
        if snapshot.winner == DRAW:
            lines.append("Game over! It's a draw!")
        else:
            lines.append(f"Game over! {Color(snapshot.winner).label} wins!")
    else:
        turn = f"Turn: {snapshot.turn.label}"
        if snapshot.passes:
            turn += f" ({snapshot.passes} pass in a row)"
        lines.append(turn)
    return "\n".join(lines)
