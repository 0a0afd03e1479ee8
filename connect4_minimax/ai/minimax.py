"""
minimax.py - Minimax search with alpha-beta pruning for the computer opponent

The opponent is the maximizing side and the human the minimizing side.
Moves are tried in ascending column order, and a later move only replaces
the current best when it scores strictly higher, so ties always go to the
lowest column and the choice is deterministic.

Each hypothetical move is applied with drop_disc, which returns a new
board; the board being searched is never modified.
"""

import math
from typing import Optional

from connect4_minimax.ai.evaluator import evaluate
from connect4_minimax.debug import debug
from connect4_minimax.game.board import Board
from connect4_minimax.game.rules import drop_disc, is_terminal, legal_moves
from connect4_minimax.utils import SEARCH_DEPTH, Player


class MinimaxPlayer:
    """
    Computer opponent that picks columns by searching the game tree.

    Search results depend only on the board passed in. The instance keeps
    a node counter for reporting, reset at every get_move call.
    """

    def __init__(self, depth: int = SEARCH_DEPTH):
        """
        Initialize the minimax player.

        Args:
            depth: Plies searched below each candidate move
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.nodes_evaluated = 0

    def get_move(self, board: Board) -> Optional[int]:
        """
        Get the best column for the opponent.

        The board must have at least one legal move; callers check
        terminality first.

        Args:
            board: The current game board

        Returns:
            The column index of the best move, or None if no column is playable
        """
        self.nodes_evaluated = 0
        debug.start_timer("search")

        best_score = -math.inf
        best_column = None

        for column in legal_moves(board):
            child = drop_disc(board, column, Player.OPPONENT)
            # The human moves next, so the reply level is minimizing
            score = self.minimax(child, self.depth, -math.inf, math.inf, False)
            debug.trace(f"Column {column} scores {score}", "search")

            if score > best_score:
                best_score = score
                best_column = column

        elapsed = debug.end_timer("search", "search")
        if best_column is None:
            debug.warning("Search called with no legal moves", "search")
        else:
            debug.info(f"Opponent picks column {best_column} (score {best_score}, "
                       f"{self.nodes_evaluated} nodes, {elapsed or 0.0:.4f}s)", "search")
        return best_column

    def minimax(self, board: Board, depth: int, alpha: float, beta: float,
                maximizing: bool) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Board to score
            depth: Remaining search depth
            alpha: Best score the opponent can already guarantee
            beta: Best score the human can already guarantee
            maximizing: True if the opponent moves next

        Returns:
            The evaluation score for this position
        """
        self.nodes_evaluated += 1

        if depth == 0 or is_terminal(board):
            return evaluate(board)

        if maximizing:
            max_score = -math.inf

            for column in legal_moves(board):
                child = drop_disc(board, column, Player.OPPONENT)
                score = self.minimax(child, depth - 1, alpha, beta, False)

                max_score = max(max_score, score)
                alpha = max(alpha, score)

                # Beta cutoff
                if beta <= alpha:
                    break

            return max_score

        else:  # Minimizing
            min_score = math.inf

            for column in legal_moves(board):
                child = drop_disc(board, column, Player.HUMAN)
                score = self.minimax(child, depth - 1, alpha, beta, True)

                min_score = min(min_score, score)
                beta = min(beta, score)

                # Alpha cutoff
                if beta <= alpha:
                    break

            return min_score


def minimax(board: Board, depth: int, alpha: float = -math.inf, beta: float = math.inf,
            maximizing: bool = True) -> float:
    """Score ``board`` with a depth-limited alpha-beta search."""
    return MinimaxPlayer(depth).minimax(board, depth, alpha, beta, maximizing)


def get_best_move(board: Board, depth: int = SEARCH_DEPTH) -> Optional[int]:
    """Pick the opponent's column on ``board``, or None if the board is full."""
    return MinimaxPlayer(depth).get_move(board)
