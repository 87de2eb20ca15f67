"""
Tests for win and draw detection.

Usage:
    pytest test_win_checker.py
    python test_win_checker.py
"""

import sys

from ttt_engine.board import Mark, new_board, board_from_string
from ttt_engine.win_checker import (
    WINNING_LINES, WinChecker, WinResult, evaluate_lines, is_draw
)


def _board_with_line(mark, line):
    board = new_board()
    for index in line:
        board[index] = mark
    return board


def test_every_line_is_detected():
    """Each of the 8 lines wins for both marks, and reports its own triple."""
    for mark in (Mark.X, Mark.O):
        for line in WINNING_LINES:
            result = evaluate_lines(_board_with_line(mark, line))
            assert result == WinResult(winner=mark, line=line), f"{mark} on {line}: {result}"


def test_line_order():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_first_line_wins_when_several_are_complete():
    # Rows 0 and 1 both complete: row 0 comes first
    assert evaluate_lines(board_from_string("XXX|OOO|___")) == WinResult(Mark.X, (0, 1, 2))
    # Column 0 and the main diagonal: column comes first
    assert evaluate_lines(board_from_string("O__|OO_|O_O")) == WinResult(Mark.O, (0, 3, 6))


def test_no_winner():
    assert evaluate_lines(new_board()) is None
    assert evaluate_lines(board_from_string("XO_|_O_|X__")) is None
    # Full board, no line
    assert evaluate_lines(board_from_string("XOX|XOO|OXX")) is None


def test_mixed_line_is_not_a_win():
    assert evaluate_lines(board_from_string("XXO|___|___")) is None


def test_winning_line_only():
    checker = WinChecker()
    assert checker.get_winning_line(board_from_string("__O|_O_|O__")) == (2, 4, 6)
    assert checker.get_winning_line(new_board()) is None


def test_full_board_without_line_is_draw():
    assert is_draw(board_from_string("XOX|XOO|OXX")) is True


def test_full_board_with_line_is_not_draw():
    # X completes the top row on a full board
    assert is_draw(board_from_string("XXX|OOX|OXO")) is False


def test_unfinished_board_is_not_draw():
    assert is_draw(new_board()) is False
    assert is_draw(board_from_string("XOX|XOO|OX_")) is False


def test_game_over():
    checker = WinChecker()
    assert checker.is_game_over(board_from_string("OOO|XX_|___"))
    assert checker.is_game_over(board_from_string("XOX|XOO|OXX"))
    assert not checker.is_game_over(board_from_string("XO_|___|___"))


def test_pure_functions():
    """Same board, same answers, board untouched."""
    board = board_from_string("XO_|_X_|O_X")
    before = list(board)

    assert evaluate_lines(board) == evaluate_lines(board)
    assert is_draw(board) == is_draw(board)
    assert board == before


if __name__ == "__main__":
    import pytest
    sys.exit(pytest.main([__file__, "-v"]))
