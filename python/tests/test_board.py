"""Board model tests — cell parsing, bounds, and direction vectors."""

from __future__ import annotations

import pytest

from backend.models.board import Board, Cell, Direction


def test_direction_vectors() -> None:
    assert Direction.UP.vector == (0, -1)
    assert Direction.DOWN.vector == (0, 1)
    assert Direction.LEFT.vector == (-1, 0)
    assert Direction.RIGHT.vector == (1, 0)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("up", Direction.UP),
        ("DOWN", Direction.DOWN),
        (" left", Direction.LEFT),
        (Direction.RIGHT, Direction.RIGHT),
        ("diagonal", None),
        (None, None),
        (1, None),
    ],
)
def test_direction_parse(token: object, expected: Direction | None) -> None:
    assert Direction.parse(token) is expected


def test_cell_from_char() -> None:
    assert Cell.from_char("X") == Cell(blocked=True, visited=True)
    assert Cell.from_char(".") == Cell(blocked=False, visited=False)
    # Anything that is not 'X' is open, including lowercase x.
    assert not Cell.from_char("x").blocked


def test_from_string_is_row_major() -> None:
    board = Board.from_string(3, 2, "X....X")
    assert board.get_cell(0, 0).blocked
    assert board.get_cell(2, 1).blocked
    assert not board.get_cell(2, 0).blocked
    assert board.count_playable() == 4


def test_from_string_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        Board.from_string(3, 3, "....")


def test_can_enter() -> None:
    board = Board.from_string(2, 2, ".X..")
    board.get_cell(0, 1).visited = True
    assert board.can_enter(0, 0)
    assert not board.can_enter(1, 0)   # blocked
    assert not board.can_enter(0, 1)   # visited
    assert not board.can_enter(2, 0)   # out of bounds
    assert not board.can_enter(0, -1)


def test_to_rows() -> None:
    board = Board.from_string(2, 1, "X.")
    assert board.to_rows() == [
        [{"blocked": True, "visited": True}, {"blocked": False, "visited": False}]
    ]
