"""
rules.py - Move legality, disc placement, and win/draw detection

Every function here is a pure function of its board argument. Placing a
disc never mutates the board it is given; the search relies on this so
hypothetical moves cannot leak into the live game or sibling branches.
"""

import numpy as np
from typing import List, Tuple

from connect4_minimax.debug import debug, DebugLevel
from connect4_minimax.game.board import Board
from connect4_minimax.utils import (ROWS, COLS, CONNECT_N, WIN_WINDOWS,
                                    GameOutcome, Player)


def is_column_playable(board: Board, col: int) -> bool:
    """
    Check whether a disc can be dropped in a column.

    Args:
        board: The board to inspect
        col: Column index (0-indexed); out-of-range values are allowed

    Returns:
        True if the column exists and its top cell is empty
    """
    if isinstance(col, bool) or not isinstance(col, (int, np.integer)):
        return False
    if not (0 <= col < COLS):
        return False
    return bool(board.grid[0, col] == Player.EMPTY.value)


def drop_disc(board: Board, col: int, player: Player) -> Board:
    """
    Drop a disc for ``player`` into ``col``.

    The column is expected to have been checked with is_column_playable.
    A full column is not an error: the board comes back unchanged.

    Returns:
        A new board with the disc in the lowest empty cell of the column
    """
    for row in range(ROWS - 1, -1, -1):
        if board.grid[row, col] == Player.EMPTY.value:
            new_board = board.copy()
            new_board.grid[row, col] = player.value
            if debug.level == DebugLevel.TRACE:
                debug.trace(f"Placed {player.name} at ({row}, {col})", "rules")
            return new_board

    debug.debug(f"Column {col} is full, board unchanged", "rules")
    return board


def _window_hits(mask: np.ndarray, anchors: Tuple[Tuple[int, int], Tuple[int, int]],
                 step: Tuple[int, int]) -> np.ndarray:
    """AND together the CONNECT_N shifted views of ``mask`` for one direction."""
    (row_start, row_stop), (col_start, col_stop) = anchors
    d_row, d_col = step
    hits = np.ones((row_stop - row_start, col_stop - col_start), dtype=bool)
    for i in range(CONNECT_N):
        r0, c0 = row_start + i * d_row, col_start + i * d_col
        hits &= mask[r0:r0 + hits.shape[0], c0:c0 + hits.shape[1]]
    return hits


def has_connect_four(board: Board, player: Player) -> bool:
    """
    Check whether ``player`` has four consecutive discs in any direction.

    Horizontal, vertical, diagonal and anti-diagonal windows are swept
    from the WIN_WINDOWS table; no other directions exist.
    """
    mask = board.grid == player.value
    for rows, cols, step in WIN_WINDOWS.values():
        if _window_hits(mask, (rows, cols), step).any():
            return True
    return False


def winning_line(board: Board, player: Player) -> List[Tuple[int, int]]:
    """
    Get the cells of a four-in-a-row for ``player``.

    Returns:
        List of (row, col) positions of the first window found, or an
        empty list if the player has not connected four
    """
    mask = board.grid == player.value
    for rows, cols, step in WIN_WINDOWS.values():
        hits = _window_hits(mask, (rows, cols), step)
        if hits.any():
            hit_row, hit_col = np.argwhere(hits)[0]
            row, col = rows[0] + int(hit_row), cols[0] + int(hit_col)
            return [(row + i * step[0], col + i * step[1]) for i in range(CONNECT_N)]
    return []


def is_board_full(board: Board) -> bool:
    """Check whether every cell is occupied."""
    return not bool((board.grid == Player.EMPTY.value).any())


def is_terminal(board: Board) -> bool:
    """
    Check whether the game has ended on this board.

    Returns:
        True if either player has four in a row or the board is full
    """
    return (has_connect_four(board, Player.HUMAN)
            or has_connect_four(board, Player.OPPONENT)
            or is_board_full(board))


def legal_moves(board: Board) -> List[int]:
    """
    Get the playable columns in ascending order.

    Returns:
        List of column indices; empty when the board is full
    """
    return [col for col in range(COLS) if is_column_playable(board, col)]


def game_outcome(board: Board) -> GameOutcome:
    """
    Classify a board for the game loop.

    Returns:
        The GameOutcome derived from the cells
    """
    if has_connect_four(board, Player.HUMAN):
        return GameOutcome.HUMAN_WIN
    if has_connect_four(board, Player.OPPONENT):
        return GameOutcome.OPPONENT_WIN
    if is_board_full(board):
        return GameOutcome.DRAW
    return GameOutcome.IN_PROGRESS
