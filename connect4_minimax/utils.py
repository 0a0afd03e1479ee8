"""
utils.py - Constants and enumerations shared by the Connect Four engine

This module holds the fixed board geometry, the player/cell tags, the
derived game outcome, and the table of four-in-a-row window families
used by the win detector.
"""

from enum import Enum, auto
from typing import Dict, Tuple

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
SEARCH_DEPTH = 4  # Plies searched below each candidate opponent move

# Glyphs used when rendering a board
EMPTY_GLYPH = "."
HUMAN_GLYPH = "O"
OPPONENT_GLYPH = "X"
CELL_SEPARATOR = " | "


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    HUMAN = 1
    OPPONENT = -1

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.HUMAN:
            return Player.OPPONENT
        elif self == Player.OPPONENT:
            return Player.HUMAN
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return EMPTY_GLYPH
        elif self == Player.HUMAN:
            return HUMAN_GLYPH
        return OPPONENT_GLYPH


class GameOutcome(Enum):
    """Game outcome, always derived from a board and never stored."""
    IN_PROGRESS = auto()
    HUMAN_WIN = auto()
    OPPONENT_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameOutcome.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL = auto()  # Row and column both increase
    ANTI_DIAGONAL = auto()  # Row decreases while column increases


# For each direction: (first anchor row, row stop), (first anchor col, col stop),
# and the (row, col) step between consecutive cells of a window.
WIN_WINDOWS: Dict[Direction, Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]] = {
    Direction.HORIZONTAL: ((0, ROWS), (0, COLS - CONNECT_N + 1), (0, 1)),
    Direction.VERTICAL: ((0, ROWS - CONNECT_N + 1), (0, COLS), (1, 0)),
    Direction.DIAGONAL: ((0, ROWS - CONNECT_N + 1), (0, COLS - CONNECT_N + 1), (1, 1)),
    Direction.ANTI_DIAGONAL: ((CONNECT_N - 1, ROWS), (0, COLS - CONNECT_N + 1), (-1, 1)),
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS
