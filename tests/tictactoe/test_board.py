"""Unit tests for src/tictactoe/board.py"""

import pytest

from src.core.exceptions import InvalidMoveError
from src.tictactoe.board import (
    COLUMNS,
    DIAGONALS,
    ROWS,
    SLOT_COUNT,
    WINNING_LINES,
    Board,
    is_within_bounds,
)


def test_eight_winning_lines() -> None:
    assert len(WINNING_LINES) == 8
    assert set(WINNING_LINES) == set(ROWS) | set(COLUMNS) | set(DIAGONALS)
    assert all(0 <= index < SLOT_COUNT for line in WINNING_LINES for index in line)


@pytest.mark.parametrize("index", range(9))
def test_slots_within_bounds(index: int) -> None:
    assert is_within_bounds(index)


@pytest.mark.parametrize("index", [-1, 9, 100, True, False, 1.0, "4", None])
def test_slots_out_of_bounds(index: object) -> None:
    assert not is_within_bounds(index)  # type: ignore[arg-type]


def test_new_board_is_empty() -> None:
    board = Board()
    assert board.slots == {}
    assert not board.is_full()
    assert board.empty_slots() == list(range(9))


def test_place_mark() -> None:
    board = Board()
    board.place_mark(4, 1)
    assert board.is_occupied(4)
    assert not board.is_occupied(0)
    assert board.slots == {4: 1}
    assert 4 not in board.empty_slots()


def test_marks_are_irrevocable() -> None:
    board = Board()
    board.place_mark(4, 1)
    with pytest.raises(InvalidMoveError):
        board.place_mark(4, 2)
    assert board.slots == {4: 1}


@pytest.mark.parametrize("index", [-1, 9])
def test_place_mark_off_the_board(index: int) -> None:
    with pytest.raises(InvalidMoveError):
        Board().place_mark(index, 1)


def test_full_board() -> None:
    board = Board({index: 1 + index % 2 for index in range(9)})
    assert board.is_full()
    assert board.empty_slots() == []


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line: tuple[int, int, int]) -> None:
    board = Board({index: 1 for index in line})
    assert board.has_line(1)
    assert not board.has_line(2)
    assert board.winning_lines(1) == [line]


def test_line_with_empty_slot_does_not_win() -> None:
    board = Board({0: 1, 1: 1})
    assert not board.has_line(1)


def test_line_with_opponent_mark_does_not_win() -> None:
    board = Board({0: 1, 1: 1, 2: 2})
    assert not board.has_line(1)
    assert not board.has_line(2)


def test_single_move_completing_two_lines() -> None:
    """Slot 0 completes both the top row and the left column."""
    board = Board({1: 1, 2: 1, 3: 1, 6: 1, 0: 1})
    assert board.winning_lines(1) == [(0, 1, 2), (0, 3, 6)]
