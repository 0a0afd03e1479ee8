"""
board.py - Board representation for Connect Four

This module implements the Board class, a fixed 6x7 grid of cell values.
Row 0 is the top of the board and row 5 the bottom, so discs fall towards
higher row indices. A Board is value-like: copying it copies one small
numpy array, and two boards compare equal when their cells match.
"""

import numpy as np
from typing import Iterable, List, Sequence

from connect4_minimax.utils import (ROWS, COLS, CELL_SEPARATOR, Player,
                                    is_valid_position)

_CELL_VALUES = {player.value for player in Player}


class Board:
    """
    Represents a Connect Four game board.

    The grid holds ``Player`` values. Within a column, occupied cells are
    always contiguous from the bottom row upward (the gravity invariant);
    the rules engine is the only code that places discs.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> 'Board':
        """
        Build a board from nested rows of cell values, top row first.

        Args:
            rows: ROWS sequences of COLS values, each 0, 1 (human) or -1 (opponent)

        Returns:
            A new Board holding those cells

        Raises:
            ValueError: If the shape or a cell value is wrong, or a disc floats
        """
        row_lists = [list(row) for row in rows]
        non_integers = [value for row in row_lists for value in row
                        if isinstance(value, bool) or not isinstance(value, (int, np.integer))]
        if non_integers:
            raise ValueError(f"Cell values must be integers, got {non_integers[:3]!r}")

        grid = np.array(row_lists)
        if grid.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}, got shape {grid.shape}")

        unknown = set(np.unique(grid).tolist()) - _CELL_VALUES
        if unknown:
            raise ValueError(f"Unknown cell values: {sorted(unknown)}")

        board = cls()
        board.grid = grid.astype(np.int8)
        if not board.satisfies_gravity():
            raise ValueError("Board has an occupied cell above an empty cell")
        return board

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        return new_board

    def cell(self, row: int, col: int) -> Player:
        """Get the player occupying a cell."""
        if not is_valid_position(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        return Player(int(self.grid[row, col]))

    def occupied_count(self) -> int:
        """Number of discs on the board."""
        return int(np.count_nonzero(self.grid))

    def satisfies_gravity(self) -> bool:
        """
        Check that no occupied cell sits directly above an empty cell.

        Returns:
            True if every column is filled contiguously from the bottom
        """
        occupied = self.grid != Player.EMPTY.value
        floating = occupied[:-1, :] & ~occupied[1:, :]
        return not bool(floating.any())

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array representing the board
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as rows of glyphs joined by a divider.

        Returns:
            String representation of the board with 1-based column numbers
        """
        lines: List[str] = []
        for row in range(ROWS):
            lines.append(CELL_SEPARATOR.join(
                str(Player(int(value))) for value in self.grid[row]))
        lines.append(CELL_SEPARATOR.join(str(col + 1) for col in range(COLS)))
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board(occupied={self.occupied_count()})"

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()


def render_board(board: Board) -> str:
    """Render a board for the terminal."""
    return board.render()
