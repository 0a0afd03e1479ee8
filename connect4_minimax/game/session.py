"""
session.py - Turn sequencing for a human versus computer game

GameSession is an explicit state machine over five states. The human
always moves first on an empty board; each accepted move either ends the
game or hands the turn to the other side.
"""

from enum import Enum, auto
from typing import List, Optional

from connect4_minimax.debug import debug
from connect4_minimax.game.board import Board
from connect4_minimax.game.rules import (drop_disc, game_outcome, is_column_playable,
                                         is_board_full, has_connect_four)
from connect4_minimax.utils import GameOutcome, Player


class GameState(Enum):
    """Whose turn it is, or how the game ended."""
    HUMAN_TO_MOVE = auto()
    OPPONENT_TO_MOVE = auto()
    HUMAN_WON = auto()
    OPPONENT_WON = auto()
    DRAW = auto()

    def is_terminal(self) -> bool:
        return self not in (GameState.HUMAN_TO_MOVE, GameState.OPPONENT_TO_MOVE)


class GameSession:
    """
    A single game between the human and the computer opponent.

    The opponent is any object with a ``get_move(board)`` method returning
    a column; a MinimaxPlayer at the default depth is used when none is given.
    """

    def __init__(self, opponent=None):
        if opponent is None:
            from connect4_minimax.ai.minimax import MinimaxPlayer
            opponent = MinimaxPlayer()
        self.opponent = opponent
        self.reset()

    def reset(self) -> None:
        """Start over on an empty board with the human to move."""
        debug.debug("Starting new game", "session")
        self.board = Board()
        self.moves_made: List[int] = []
        self._state = GameState.HUMAN_TO_MOVE

    @property
    def state(self) -> GameState:
        return self._state

    def is_over(self) -> bool:
        return self._state.is_terminal()

    def outcome(self) -> GameOutcome:
        return game_outcome(self.board)

    def play_human(self, column: int) -> bool:
        """
        Apply the human's move.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            True if the move was applied, False if it is not the human's
            turn or the column is not playable
        """
        if self._state != GameState.HUMAN_TO_MOVE:
            debug.debug(f"Ignoring human move in state {self._state.name}", "session")
            return False

        if not is_column_playable(self.board, column):
            debug.debug(f"Invalid human move: column {column}", "session")
            return False

        self._apply(column, Player.HUMAN)
        return True

    def play_opponent(self) -> Optional[int]:
        """
        Ask the opponent for a move and apply it.

        Returns:
            The column played, or None if it is not the opponent's turn
        """
        if self._state != GameState.OPPONENT_TO_MOVE:
            debug.debug(f"Ignoring opponent move in state {self._state.name}", "session")
            return None

        column = self.opponent.get_move(self.board)
        if column is None or not is_column_playable(self.board, column):
            raise RuntimeError(f"Opponent returned an unplayable column: {column}")

        self._apply(column, Player.OPPONENT)
        return column

    def _apply(self, column: int, player: Player) -> None:
        self.board = drop_disc(self.board, column, player)
        self.moves_made.append(column)

        if has_connect_four(self.board, player):
            self._state = GameState.HUMAN_WON if player == Player.HUMAN else GameState.OPPONENT_WON
            debug.info(f"{player.name} wins after {len(self.moves_made)} moves", "session")
        elif is_board_full(self.board):
            self._state = GameState.DRAW
            debug.info("Game ends in a draw", "session")
        elif player == Player.HUMAN:
            self._state = GameState.OPPONENT_TO_MOVE
        else:
            self._state = GameState.HUMAN_TO_MOVE
