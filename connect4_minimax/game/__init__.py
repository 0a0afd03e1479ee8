"""
connect4_minimax.game - Board, rules, and game sequencing for Connect Four

The environment lives in connect4_minimax.game.env and is not imported
here, so the engine can be used without loading gymnasium.
"""

from connect4_minimax.game.board import Board, render_board
from connect4_minimax.game.rules import (drop_disc, game_outcome, has_connect_four,
                                         is_board_full, is_column_playable,
                                         is_terminal, legal_moves, winning_line)
from connect4_minimax.game.session import GameSession, GameState

__all__ = [
    'Board', 'render_board', 'drop_disc', 'game_outcome', 'has_connect_four',
    'is_board_full', 'is_column_playable', 'is_terminal', 'legal_moves',
    'winning_line', 'GameSession', 'GameState',
]
