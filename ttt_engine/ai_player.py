"""
AI player for TicTacToe evaluation.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Dict

from .board import Board, Mark, get_empty_cells, index_to_cell
from .config import EngineConfig
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe as O using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search is exhaustive (no pruning). Wins are scored
    10 - depth and losses -10 + depth, so among winning moves the
    fastest is preferred and among losing moves the slowest.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the AI player.

        Args:
            verbose: Print a summary line after each search.
        """
        self.player = EngineConfig.AI_MARK
        self.opponent = EngineConfig.OPPONENT_MARK
        self.win_checker = WinChecker()
        self.verbose = verbose

        # How many positions the last search scored (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for O on the given board.

        Ties go to the lowest index: a later move only replaces the
        current best if it scores strictly higher.

        Args:
            board: Current board (9 cells). Not modified.

        Returns:
            Index (0-8) of the best move, or EngineConfig.NO_MOVE if
            the board is full.
        """
        self.positions_evaluated = 0

        valid_moves = get_empty_cells(board)
        if not valid_moves:
            return EngineConfig.NO_MOVE

        # Below any real score, so the first move always replaces it
        best_score = -EngineConfig.WIN_SCORE - 1
        best_move = valid_moves[0]

        for index in valid_moves:
            score = self._score_root_move(board, index)

            if score > best_score:
                best_score = score
                best_move = index

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def score_moves(self, board: Board) -> Dict[int, int]:
        """
        Score every move O could make on the given board.

        Args:
            board: Current board (9 cells). Not modified.

        Returns:
            {index: minimax score} for each empty cell, in ascending order.
        """
        self.positions_evaluated = 0
        return {index: self._score_root_move(board, index) for index in get_empty_cells(board)}

    def _score_root_move(self, board: Board, index: int) -> int:
        """Score O playing at index, on a private copy of the board."""
        hypothetical = list(board)
        hypothetical[index] = self.player
        # The next ply belongs to the opponent
        return self._minimax(hypothetical, depth=0, is_maximizing=False)

    def _minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Exhaustive minimax.

        The board is shared by all sibling branches: each move is placed,
        scored, then taken back, so the board is unchanged on return.

        Args:
            board: Position to score. Mutated during the call, restored after.
            depth: Plies played since the root move.
            is_maximizing: True if it's O's turn.

        Returns:
            The score of the position, between -10 and 10.
        """
        self.positions_evaluated += 1

        # Check terminal states
        result = self.win_checker.check_winner(board)
        if result is not None:
            if result.winner == self.player:
                return EngineConfig.WIN_SCORE - depth  # Win (prefer faster wins)
            return -EngineConfig.WIN_SCORE + depth  # Loss (prefer slower losses)

        if self.win_checker.check_draw(board):
            return EngineConfig.DRAW_SCORE

        if is_maximizing:
            best_score = -EngineConfig.WIN_SCORE - 1
            for index in get_empty_cells(board):
                board[index] = self.player
                score = self._minimax(board, depth + 1, False)
                board[index] = Mark.EMPTY
                best_score = max(best_score, score)
            return best_score
        else:
            best_score = EngineConfig.WIN_SCORE + 1
            for index in get_empty_cells(board):
                board[index] = self.opponent
                score = self._minimax(board, depth + 1, True)
                board[index] = Mark.EMPTY
                best_score = min(best_score, score)
            return best_score

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move == EngineConfig.NO_MOVE:
            return "No moves available!"

        row, col = index_to_cell(move)

        return f"Place {self.player.symbol} at position ({row}, {col})"


def choose_move(board: Board) -> int:
    """Best move for O on the board, or EngineConfig.NO_MOVE if it's full."""
    return AIPlayer().get_best_move(board)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string, format_rows

    print("Testing AIPlayer...")

    ai = AIPlayer(verbose=True)

    # Test 1: AI should block a winning move
    board = board_from_string("XX_|_O_|___")
    print("\n".join(format_rows(board)))
    print("\nAI is O. X is about to win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")

    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = board_from_string("OO_|XX_|___")
    print("\n".join(format_rows(board)))
    print("\nAI is O. Can win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")

    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
