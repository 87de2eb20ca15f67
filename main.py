"""
Command-line analysis of a TicTacToe board.

Reads one board, reports the winner or draw, and which move
O should play.

Usage:
    python main.py OO_XX____            # Analyze a board
    python main.py "OO_|XX_|___"        # Rows may be separated by | or /
    python main.py XX__O____ --scores   # Also print every move's score
"""

import argparse
import sys
from typing import List, Optional

from ttt_engine.ai_player import AIPlayer
from ttt_engine.board import board_from_string, format_rows, index_to_cell
from ttt_engine.config import EngineConfig
from ttt_engine.move_validator import MoveValidator
from ttt_engine.win_checker import WinChecker


def analyze(text: str, show_scores: bool = False) -> int:
    """
    Print an analysis of the board.

    Args:
        text: Board string (9 symbols of X, O, _).
        show_scores: Also print the minimax score of every move.

    Returns:
        Exit code: 0 on success, 1 if the board couldn't be read.
    """
    try:
        board = board_from_string(text)
    except ValueError as e:
        print(f"Invalid board: {e}")
        return 1

    result = MoveValidator().validate_board(board)
    if not result.is_valid:
        print(f"Invalid board: {result.error_message}")
        return 1

    for row in format_rows(board):
        print(f"  {row}")
    print()

    checker = WinChecker()
    win = checker.check_winner(board)
    if win is not None:
        print(f"{win.winner.symbol} wins on line {win.line}")
        return 0

    if checker.check_draw(board):
        print("Draw")
        return 0

    ai = AIPlayer()
    if show_scores:
        for index, score in ai.score_moves(board).items():
            row, col = index_to_cell(index)
            print(f"  move {index} ({row}, {col}): {score:+d}")
        print()

    # Not won and not drawn, so there is at least one empty cell
    move = ai.get_best_move(board)
    print(f"Best move for {EngineConfig.AI_MARK.symbol}: {move} {index_to_cell(move)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe board analysis")
    parser.add_argument(
        "board",
        help="Board as 9 symbols, row by row (X, O, and _ for empty)"
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Print the minimax score of every move"
    )

    args = parser.parse_args(argv)

    return analyze(args.board, show_scores=args.scores)


if __name__ == "__main__":
    sys.exit(main())
