"""Core gameplay logic — applies moves to a board and checks the win condition."""

from __future__ import annotations

from icerunner.engine.gamerules import generate_moves
from icerunner.engine.gamestate import GameState
from icerunner.models.board import Board
from icerunner.models.grid import Direction


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, board: Board) -> None:
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Start a session on *board* with the move counter at zero."""
        return cls(board)

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Slide the marker in *direction*.

        Returns True if the move was legal and has been applied.
        """
        for mv, after in generate_moves(self.state.board):
            if mv.direction is direction:
                self.state.advance(after)
                return True
        return False

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
