"""Ice runner solver."""

from __future__ import annotations

from icerunner.engine.gamerules import Move, generate_moves, is_goal
from icerunner.engine.gamesolver.search import breadth_first_search
from icerunner.models.board import Board


class Solver:
    """Breadth-first solving of ice boards; holds no state between calls."""

    @staticmethod
    def solve(board: Board) -> list[Move] | None:
        """Return a shortest move sequence that solves *board*.

        ``[]`` means *board* is already solved; ``None`` means it is unsolvable.
        """
        result = breadth_first_search(board, is_goal, generate_moves)
        if result is None:
            return None
        moves, _ = result
        return moves

    @staticmethod
    def hint(board: Board) -> Move | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return Solver.solve(board) is not None
