"""Rich terminal frontend — loads a board file, solves it, shows the result.

Uses the ``rich`` library for the board panels; plain status lines are
printed without markup so they stay easy to grep and to test.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from icerunner.engine.gameplay import GamePlay
from icerunner.engine.gamerules import Move
from icerunner.engine.gamesolver import Solver
from icerunner.models.board import Board, BoardParseError
from icerunner.models.grid import GRID_SIZE, Cell

logger = logging.getLogger(__name__)

_CELL_STYLES = {
    Cell.ICE: "[bright_cyan]·[/bright_cyan]",
    Cell.WALL: "[bold white on grey23]*[/bold white on grey23]",
    Cell.START: "[bold yellow]S[/bold yellow]",
    Cell.END: "[bold green]E[/bold green]",
}


# -- rendering ----------------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the ice grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(GRID_SIZE):
        table.add_column(width=1, justify="center")

    for row in board.rows():
        table.add_row(*(_CELL_STYLES[c] if c is not None else " " for c in row))

    return table


def format_solution(moves: Iterable[Move]) -> str:
    """Render *moves* compactly, e.g. ``S→↓←``.

    The moving object's symbol is written whenever it differs from the
    object of the previous move.
    """
    out: list[str] = []
    last: Cell | None = None
    for mv in moves:
        if mv.cell is not last:
            last = mv.cell
            out.append(str(mv.cell))
        out.append(mv.direction.symbol)
    return "".join(out)


def _board_panel(board: Board, title: str, border_style: str = "bright_blue") -> Align:
    panel = Panel(
        Align.center(render_board(board)),
        title=title,
        border_style=border_style,
        padding=(0, 2),
    )
    return Align.center(panel)


# -- entry point ---------------------------------------------------------------


def run(path: Path, console: Console | None = None, err_console: Console | None = None) -> int:
    """Load, parse and solve the board at *path*.  Returns the exit code."""
    console = console or Console(highlight=False)
    err_console = err_console or Console(stderr=True, highlight=False)

    try:
        src = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("reading %s failed", path, exc_info=True)
        err_console.print(f"Failed to read {path} [{exc}]", markup=False)
        return 1

    console.out(src, end="")
    try:
        board = Board.from_text(src)
    except BoardParseError as exc:
        logger.info("parse failed (%s): %s", exc.kind, exc)
        console.print(f"Failed to parse IceRunner: {exc}", markup=False)
        return 1

    console.print("Parse done", markup=False)
    console.print(_board_panel(board, "[bold cyan]Ice Runner[/bold cyan]"))

    moves = Solver.solve(board)
    if moves is None:
        console.print("no solution", markup=False)
        return 0

    console.print("solution:", markup=False)
    console.print(format_solution(moves), markup=False)

    game = GamePlay.from_board(board)
    for i, mv in enumerate(moves, 1):
        game.move(mv.direction)
        done = game.is_won
        console.print(
            _board_panel(
                game.board,
                f"[bold]move {i}/{len(moves)}  {mv}[/bold]",
                "green" if done else "bright_blue",
            )
        )
    logger.info("solved %s in %d moves", path, game.state.moves)
    return 0
