from icerunner.models.board import Board, BoardParseError, ParseErrorKind
from icerunner.models.grid import GRID_SIZE, Cell, Direction, Pos

__all__ = [
    "GRID_SIZE",
    "Board",
    "BoardParseError",
    "Cell",
    "Direction",
    "ParseErrorKind",
    "Pos",
]
