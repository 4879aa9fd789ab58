"""Board model for the ice runner puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator, Mapping

from icerunner.models.grid import GRID_SIZE, Cell, Pos


class ParseErrorKind(StrEnum):
    DIMENSIONS = "dimensions"
    CHARACTER = "character"
    DUPLICATE_START = "duplicate_start"
    DUPLICATE_END = "duplicate_end"
    MISSING_START = "missing_start"
    MISSING_END = "missing_end"
    TRAILING = "trailing"


class BoardParseError(ValueError):
    """Raised when board text does not describe a valid ice runner board."""

    def __init__(self, kind: ParseErrorKind, message: str, pos: Pos | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.pos = pos


@dataclass(frozen=True)
class Board:
    """An immutable 5×5 ice runner board.

    Cells are stored in a flat row-major tuple; ``None`` marks a cell that has
    not been set.  ``end`` caches the position of the END cell so the goal
    check does not need to scan the grid.
    """

    cells: tuple[Cell | None, ...]
    end: Pos

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls(cells=(None,) * (GRID_SIZE * GRID_SIZE), end=Pos(0, 0))

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse a board from its text form.

        The text must be exactly five lines of five characters, each line
        ending in ``\\n``.  Example::

            Board.from_text("S....\\n*....\\n*....\\n*....\\nE....\\n")

        Raises :class:`BoardParseError` on the first violated constraint.
        """
        chars = iter(text)
        cells: list[Cell] = []
        start_seen = False
        end: Pos | None = None

        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                pos = Pos(x, y)
                ch = next(chars, None)
                if ch is None or ch == "\n":
                    raise BoardParseError(
                        ParseErrorKind.DIMENSIONS,
                        f"row {y} is shorter than {GRID_SIZE} cells",
                        pos,
                    )
                try:
                    cell = Cell(ch)
                except ValueError:
                    raise BoardParseError(
                        ParseErrorKind.CHARACTER,
                        f"invalid character {ch!r} at {pos}",
                        pos,
                    ) from None
                if cell is Cell.START:
                    if start_seen:
                        raise BoardParseError(
                            ParseErrorKind.DUPLICATE_START,
                            f"only one start point allowed (second at {pos})",
                            pos,
                        )
                    start_seen = True
                elif cell is Cell.END:
                    if end is not None:
                        raise BoardParseError(
                            ParseErrorKind.DUPLICATE_END,
                            f"only one end point allowed (second at {pos})",
                            pos,
                        )
                    end = pos
                cells.append(cell)
            if next(chars, None) != "\n":
                raise BoardParseError(
                    ParseErrorKind.DIMENSIONS,
                    f"row {y} must be exactly {GRID_SIZE} cells followed by a line break",
                )

        if not start_seen:
            raise BoardParseError(ParseErrorKind.MISSING_START, "board has no start point")
        if end is None:
            raise BoardParseError(ParseErrorKind.MISSING_END, "board has no end point")
        if next(chars, None) is not None:
            raise BoardParseError(
                ParseErrorKind.TRAILING,
                f"unexpected content after row {GRID_SIZE - 1}",
            )
        return cls(cells=tuple(cells), end=end)

    # -- queries --------------------------------------------------------------

    def get(self, pos: Pos) -> Cell | None:
        return self.cells[pos.index]

    def positions(self) -> Iterator[Pos]:
        return Pos.values()

    def find(self, cell: Cell) -> Pos | None:
        """Return the first position holding *cell*, scanning row-major."""
        for pos in Pos.values():
            if self.cells[pos.index] is cell:
                return pos
        return None

    @property
    def marker(self) -> Pos | None:
        return self.find(Cell.START)

    # -- updates --------------------------------------------------------------

    def with_cells(self, changes: Mapping[Pos, Cell | None]) -> Board:
        """Return a copy of this board with *changes* applied.

        Placing an END cell moves the cached end position along with it.
        """
        cells = list(self.cells)
        end = self.end
        for pos, cell in changes.items():
            cells[pos.index] = cell
            if cell is Cell.END:
                end = pos
        return Board(cells=tuple(cells), end=end)

    def with_cell(self, pos: Pos, cell: Cell | None) -> Board:
        return self.with_cells({pos: cell})

    # -- display --------------------------------------------------------------

    def __str__(self) -> str:
        out: list[str] = []
        for pos in Pos.values():
            cell = self.cells[pos.index]
            if cell is not None:
                out.append(cell.value)
            if pos.x == GRID_SIZE - 1:
                out.append("\n")
        return "".join(out)

    def rows(self) -> list[list[Cell | None]]:
        return [
            list(self.cells[y * GRID_SIZE : (y + 1) * GRID_SIZE])
            for y in range(GRID_SIZE)
        ]
