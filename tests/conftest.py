"""Shared fixtures for the Connect Four test suite."""

import pytest

from connect4_minimax.debug import debug
from connect4_minimax.game.board import Board
from connect4_minimax.utils import Player

H = Player.HUMAN.value
X = Player.OPPONENT.value

# Full board with no four-in-a-row anywhere (21 discs each)
DRAW_ROWS = [
    [H, H, X, X, H, H, X],
    [X, X, H, H, X, X, H],
    [H, H, X, X, H, H, X],
    [X, X, H, H, X, X, H],
    [H, H, X, X, H, H, X],
    [X, X, H, H, X, X, H],
]


def place(cells):
    """Build a board from {(row, col): Player}, ignoring gravity."""
    board = Board()
    for (row, col), player in cells.items():
        board.grid[row, col] = player.value
    return board


class FixedOpponent:
    """Opponent that plays a scripted list of columns."""

    def __init__(self, columns):
        self.columns = list(columns)
        self.seen = []

    def get_move(self, board):
        self.seen.append(board.copy())
        return self.columns.pop(0)


@pytest.fixture
def draw_board():
    return Board.from_rows(DRAW_ROWS)


@pytest.fixture
def opponent_wins_in_column_4():
    """Opponent to move with three stacked in column 4; no human threat."""
    return place({
        (5, 0): Player.HUMAN, (4, 0): Player.HUMAN,
        (5, 1): Player.HUMAN, (5, 6): Player.HUMAN,
        (5, 4): Player.OPPONENT, (4, 4): Player.OPPONENT, (3, 4): Player.OPPONENT,
    })


@pytest.fixture
def human_threatens_column_3():
    """Opponent to move; human has row 5 columns 0-2, opponent no win."""
    return place({
        (5, 0): Player.HUMAN, (5, 1): Player.HUMAN, (5, 2): Player.HUMAN,
        (4, 0): Player.OPPONENT, (4, 1): Player.OPPONENT,
    })


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the shared debug manager at its default level between tests."""
    level = debug.level
    yield
    debug.configure(level=level, enabled=True, components=[])
