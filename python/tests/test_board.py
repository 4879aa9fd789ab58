import pytest

from icerunner.models.board import Board, BoardParseError, ParseErrorKind
from icerunner.models.grid import Cell, Pos

WALL_COLUMN = "S....\n*....\n*....\n*....\nE....\n"


def test_parse_wall_column():
    board = Board.from_text(WALL_COLUMN)
    assert board.get(Pos(0, 0)) is Cell.START
    assert board.get(Pos(1, 0)) is Cell.ICE
    for y in (1, 2, 3):
        assert board.get(Pos(0, y)) is Cell.WALL
    assert board.get(Pos(0, 4)) is Cell.END
    assert board.end == Pos(0, 4)
    assert board.marker == Pos(0, 0)


@pytest.mark.parametrize(
    "text",
    [
        WALL_COLUMN,
        "....S\n.*.*.\n..E..\n*...*\n.....\n",
        "*****\n*S..*\n*.*.*\n*..E*\n*****\n",
    ],
)
def test_format_round_trip(text):
    assert str(Board.from_text(text)) == text


@pytest.mark.parametrize(
    "text, kind",
    [
        ("S....\n*....\n*....\nE....\n", ParseErrorKind.DIMENSIONS),
        ("S.....\n*....\n*....\n*....\nE....\n", ParseErrorKind.DIMENSIONS),
        ("S...\n*....\n*....\n*....\nE....\n", ParseErrorKind.DIMENSIONS),
        ("S....\n*....\n*....\n*....\nE....", ParseErrorKind.DIMENSIONS),
        ("S....\r\n*....\r\n*....\r\n*....\r\nE....\r\n", ParseErrorKind.DIMENSIONS),
        ("S....\n*.?..\n*....\n*....\nE....\n", ParseErrorKind.CHARACTER),
        ("S....\n*..S.\n*....\n*....\nE....\n", ParseErrorKind.DUPLICATE_START),
        ("S....\n*..E.\n*....\n*....\nE....\n", ParseErrorKind.DUPLICATE_END),
        (".....\n*....\n*....\n*....\nE....\n", ParseErrorKind.MISSING_START),
        ("S....\n*....\n*....\n*....\n.....\n", ParseErrorKind.MISSING_END),
        (WALL_COLUMN + ".", ParseErrorKind.TRAILING),
        (WALL_COLUMN + "\n", ParseErrorKind.TRAILING),
        ("", ParseErrorKind.DIMENSIONS),
    ],
)
def test_parse_rejects(text, kind):
    with pytest.raises(BoardParseError) as excinfo:
        Board.from_text(text)
    assert excinfo.value.kind is kind
    assert isinstance(excinfo.value, ValueError)


def test_duplicate_start_fails_at_second_marker():
    text = "SS...\n*....\n*.?..\n*....\n.....\n"
    with pytest.raises(BoardParseError) as excinfo:
        Board.from_text(text)
    assert excinfo.value.kind is ParseErrorKind.DUPLICATE_START
    assert excinfo.value.pos == Pos(1, 0)


def test_duplicate_end_fails_at_second_end():
    text = "S...E\n..E..\n.?...\n.....\n.....\n"
    with pytest.raises(BoardParseError) as excinfo:
        Board.from_text(text)
    assert excinfo.value.kind is ParseErrorKind.DUPLICATE_END
    assert excinfo.value.pos == Pos(2, 1)


def test_missing_start_reported_before_missing_end():
    with pytest.raises(BoardParseError) as excinfo:
        Board.from_text(".....\n.....\n.....\n.....\n.....\n")
    assert excinfo.value.kind is ParseErrorKind.MISSING_START


def test_empty_board_formats_as_bare_line_breaks():
    board = Board.empty()
    assert board.get(Pos(3, 3)) is None
    assert str(board) == "\n" * 5
    assert board.marker is None


def test_with_cells_returns_new_board():
    board = Board.from_text(WALL_COLUMN)
    moved = board.with_cells({Pos(4, 0): Cell.START, Pos(0, 0): Cell.ICE})
    assert moved is not board
    assert board.get(Pos(0, 0)) is Cell.START
    assert moved.get(Pos(0, 0)) is Cell.ICE
    assert moved.marker == Pos(4, 0)
    assert moved.end == board.end


def test_with_cell_tracks_end():
    board = Board.empty().with_cell(Pos(2, 3), Cell.END)
    assert board.end == Pos(2, 3)


def test_boards_compare_and_hash_by_value():
    a = Board.from_text(WALL_COLUMN)
    b = Board.from_text(WALL_COLUMN)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != a.with_cell(Pos(4, 4), Cell.WALL)
