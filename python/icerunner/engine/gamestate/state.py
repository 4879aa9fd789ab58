"""Tracks the state of a game in progress."""

from __future__ import annotations

from icerunner.engine.gamerules import is_goal
from icerunner.models.board import Board


class GameState:
    """Holds the current board and the move counter."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board) -> None:
        self.board = board
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return is_goal(self.board)
