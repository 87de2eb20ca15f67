"""
TicTacToe board evaluation.
Detects wins and draws, and picks O's best move with minimax.
"""

__version__ = "1.0.0"

from .board import Mark, new_board, get_empty_cells, board_from_string, board_to_string
from .config import EngineConfig
from .win_checker import WinChecker, WinResult, WINNING_LINES, evaluate_lines, is_draw
from .ai_player import AIPlayer, choose_move
from .move_validator import MoveValidator, ValidationResult
