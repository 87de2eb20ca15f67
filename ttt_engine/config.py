"""
Engine configuration for TicTacToe evaluation.
Board geometry, player marks, and scoring constants.

These are fixed rules of the game, not tuning knobs - changing them
changes what the search returns.
"""

from .board import Mark


class EngineConfig:
    """
    Configuration class for the evaluator and the search.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored row-major (index = row * 3 + col)
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== PLAYERS ====================
    # The automated player always plays O and maximizes
    AI_MARK = Mark.O
    OPPONENT_MARK = Mark.X

    # ==================== SCORING ====================
    # A win is worth WIN_SCORE minus the depth it was reached at,
    # so faster wins and slower losses score better.
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # Returned by the search when the board has no empty cell
    NO_MOVE = -1

    # ==================== BOARD STRINGS ====================
    # Characters accepted as an empty cell when parsing a board string
    EMPTY_SYMBOLS = ("_", ".", "-", " ")

    # Characters skipped when parsing ("XO_|_X_|O__" or "XO_/_X_/O__")
    SEPARATOR_SYMBOLS = ("|", "/", "\n", "\r", "\t")
