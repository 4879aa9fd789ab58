"""Puzzle rules: the slide-until-blocked move and the goal test."""

from __future__ import annotations

import logging
from typing import NamedTuple

from icerunner.models.board import Board
from icerunner.models.grid import Cell, Direction, Pos

logger = logging.getLogger(__name__)


class Move(NamedTuple):
    """A move label: which object moved and in which direction."""

    cell: Cell
    direction: Direction

    def __str__(self) -> str:
        return f"{self.cell}{self.direction.symbol}"


def slide(board: Board, pos: Pos, direction: Direction) -> Pos:
    """Return where an object at *pos* comes to rest sliding in *direction*.

    The slide stops on the last cell before a wall or before the board edge.
    Unset cells do not block.
    """
    while True:
        nxt = pos.step(direction)
        if nxt is None:
            return pos
        cell = board.get(nxt)
        if cell is not None and cell.is_obstacle:
            return pos
        pos = nxt


def move_marker(board: Board, pos: Pos, direction: Direction) -> tuple[Cell, Board] | None:
    """Slide the marker at *pos* in *direction*.

    Returns ``None`` when *pos* does not hold the marker or when the marker
    cannot move at all in that direction.
    """
    obj = board.get(pos)
    if obj is None or not obj.is_start:
        return None

    dest = slide(board, pos, direction)
    if dest == pos:
        return None
    return obj, board.with_cells({dest: obj, pos: Cell.ICE})


def generate_moves(board: Board) -> list[tuple[Move, Board]]:
    """Every legal move from *board* together with the resulting board.

    Positions are tried in row-major order and, for each, directions in
    North, South, West, East order.
    """
    moves: list[tuple[Move, Board]] = []
    for pos in board.positions():
        for direction in Direction.values():
            result = move_marker(board, pos, direction)
            if result is None:
                continue
            obj, after = result
            logger.debug("obj %s pos %s dir %s\n%s", obj, pos, direction.symbol, after)
            moves.append((Move(obj, direction), after))
    return moves


def is_goal(board: Board) -> bool:
    return board.get(board.end) is Cell.START
