"""
Board representation for TicTacToe evaluation.
A board is a plain list of 9 marks in row-major order.
"""

from enum import Enum
from typing import List, Tuple


class Mark(Enum):
    """The three states a cell can be in."""
    EMPTY = "_"
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark (EMPTY stays EMPTY)."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        return self.value


# A board is always exactly 9 cells
Board = List[Mark]

# Kept local so board.py does not import config (config imports Mark)
_SIZE = 3
_CELLS = _SIZE * _SIZE


def new_board() -> Board:
    """Create an empty board."""
    return [Mark.EMPTY for _ in range(_CELLS)]


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board.

    Returns:
        Indices of empty cells, in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell == Mark.EMPTY]


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a flat index (0-8) to (row, col)."""
    return divmod(index, _SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a flat index (0-8)."""
    return row * _SIZE + col


def board_from_string(text: str) -> Board:
    """
    Parse a board from a string of 9 symbols.

    "X" and "O" (any case) are marks; "_", ".", "-" and spaces are empty.
    Row separators ("|", "/", newlines) are skipped, so "OO_|XX_|___"
    and "OO_XX____" are the same board.

    Args:
        text: The board string.

    Returns:
        A new board.

    Raises:
        ValueError: If a symbol is unknown or there aren't exactly 9 cells.
    """
    # Imported here to avoid a circular import at module load
    from .config import EngineConfig

    board = []
    for char in text:
        if char in EngineConfig.SEPARATOR_SYMBOLS:
            continue
        if char in EngineConfig.EMPTY_SYMBOLS:
            board.append(Mark.EMPTY)
        elif char.upper() == "X":
            board.append(Mark.X)
        elif char.upper() == "O":
            board.append(Mark.O)
        else:
            raise ValueError(f"Unknown board symbol {char!r} in {text!r}")

    if len(board) != EngineConfig.BOARD_CELLS:
        raise ValueError(
            f"Board must have {EngineConfig.BOARD_CELLS} cells, got {len(board)} in {text!r}"
        )

    return board


def board_to_string(board: Board) -> str:
    """Format a board as a 9-character symbol string (e.g. "OO_XX____")."""
    return "".join(cell.symbol for cell in board)


def format_rows(board: Board) -> List[str]:
    """Split a board into its three row strings, top to bottom."""
    text = board_to_string(board)
    return [text[start:start + _SIZE] for start in range(0, len(text), _SIZE)]
