"""
connect4_minimax - Connect Four against a minimax opponent

This package provides the board representation and rules engine, a
terminal-score evaluator and an alpha-beta minimax search for the
computer opponent, a turn-sequencing game session, a Gymnasium
environment, and a command-line game loop.
"""

# Version number
__version__ = '0.1.0'
