"""
Win checker for TicTacToe evaluation.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Mark


# All possible winning lines, as board indices.
# The order matters: when more than one line is complete,
# the first one in this table is reported.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinResult:
    """The winning mark and the line that produced the win."""
    winner: Mark
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Args:
            board: The board (9 cells).

        Returns:
            The winning mark and line, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(winner=winner, line=line)

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
        """Return the mark filling all 3 cells of the line, or None."""
        a, b, c = line
        first = board[a]
        if first == Mark.EMPTY:
            return None  # Empty cell, no winner on this line

        if first == board[b] == board[c]:
            return first

        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw is a full board with no winner. A won board is never a
        draw, even when it is also full.

        Args:
            board: The board (9 cells).

        Returns:
            True if the game is a draw.
        """
        # First check if there's a winner - if so, not a draw
        if self.check_winner(board) is not None:
            return False

        return all(cell != Mark.EMPTY for cell in board)

    def is_game_over(self, board: Board) -> bool:
        """True if someone has won or the board is drawn."""
        return self.check_winner(board) is not None or self.check_draw(board)

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The winning line as a triple of indices, or None.
        """
        result = self.check_winner(board)
        return result.line if result is not None else None


_checker = WinChecker()


def evaluate_lines(board: Board) -> Optional[WinResult]:
    """Find the first complete line on the board, if any."""
    return _checker.check_winner(board)


def is_draw(board: Board) -> bool:
    """True if the board is full and nobody has won."""
    return _checker.check_draw(board)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    result = checker.check_winner(board_from_string("XXX|_O_|O__"))
    print(f"Test 1 (horizontal): {result}")
    assert result == WinResult(Mark.X, (0, 1, 2))

    # Test 2: Vertical win
    result = checker.check_winner(board_from_string("OX_|OX_|O__"))
    print(f"Test 2 (vertical): {result}")
    assert result == WinResult(Mark.O, (0, 3, 6))

    # Test 3: Diagonal win
    result = checker.check_winner(board_from_string("XO_|_XO|__X"))
    print(f"Test 3 (diagonal): {result}")
    assert result == WinResult(Mark.X, (0, 4, 8))

    # Test 4: No winner
    result = checker.check_winner(board_from_string("XO_|_O_|___"))
    print(f"Test 4 (no winner): {result}")
    assert result is None

    # Test 5: Draw (full board, no winner)
    draw = checker.check_draw(board_from_string("XOX|XOO|OXX"))
    print(f"Test 5 (draw): is_draw = {draw}")
    assert draw

    print("\nWinChecker test done!")
