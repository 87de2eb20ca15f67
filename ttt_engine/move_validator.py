"""
Move validator for TicTacToe evaluation.
Checks boards and moves before they are handed to the engine.

The engine itself trusts its input; callers that take boards from
outside (command line, another program) validate here first.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Mark, get_empty_cells
from .config import EngineConfig
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of board or move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe boards and moves.

    Rules:
    1. A board has exactly 9 cells, each a Mark
    2. Can only place on empty cells, indices 0-8
    3. Game must not be over
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_board(self, board: Board) -> ValidationResult:
        """
        Validate a board's shape and contents.

        Args:
            board: The board to check.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if len(board) != EngineConfig.BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board must have {EngineConfig.BOARD_CELLS} cells, got {len(board)}"
            )

        for index, cell in enumerate(board):
            if not isinstance(cell, Mark):
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Cell {index} holds {cell!r}, not a Mark"
                )

        return ValidationResult(is_valid=True)

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        board_validation = self.validate_board(board)
        if not board_validation.is_valid:
            return board_validation

        # Check if game is over
        if self.win_checker.is_game_over(board):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not (0 <= index < EngineConfig.BOARD_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{EngineConfig.BOARD_CELLS - 1}."
            )

        # Check if cell is empty
        if board[index] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on the board.

        Args:
            board: Current board.

        Returns:
            Indices of valid moves, or [] if the game is over.
        """
        if self.win_checker.is_game_over(board):
            return []

        return get_empty_cells(board)
