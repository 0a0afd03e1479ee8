"""
evaluator.py - Static board evaluation from the opponent's point of view
"""

from connect4_minimax.game.board import Board
from connect4_minimax.game.rules import has_connect_four
from connect4_minimax.utils import Player

WIN_SCORE = 10
LOSS_SCORE = -10
NEUTRAL_SCORE = 0


def evaluate(board: Board) -> int:
    """
    Score a board for the opponent.

    Only completed lines count: +10 for an opponent four-in-a-row, -10
    for a human one, 0 otherwise. The opponent is checked first.
    """
    if has_connect_four(board, Player.OPPONENT):
        return WIN_SCORE
    if has_connect_four(board, Player.HUMAN):
        return LOSS_SCORE
    return NEUTRAL_SCORE
