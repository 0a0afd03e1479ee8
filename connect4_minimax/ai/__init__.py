"""
connect4_minimax/ai/__init__.py - Computer opponent for Connect Four
"""

from connect4_minimax.ai.evaluator import evaluate
from connect4_minimax.ai.minimax import MinimaxPlayer, get_best_move, minimax

__all__ = ['evaluate', 'MinimaxPlayer', 'get_best_move', 'minimax']
