"""
env.py - Gymnasium environment for playing the human side against minimax

The agent's action is a column for the human; after each accepted action
the minimax opponent replies within the same step.
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Dict, Optional, Tuple

from connect4_minimax.debug import debug
from connect4_minimax.game.rules import is_column_playable, legal_moves, winning_line
from connect4_minimax.game.session import GameSession, GameState
from connect4_minimax.utils import ROWS, COLS, Player


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the 6x7 board with 1 for the agent's discs, -1 for the
    opponent's and 0 for empty cells.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_lose = -1.0
    reward_draw = 0.0
    reward_invalid_move = -0.5
    reward_step = 0.0

    def __init__(self, render_mode: Optional[str] = None, opponent=None):
        """
        Initialize the environment.

        Args:
            render_mode: "ascii", "human" or None
            opponent: Object with get_move(board); defaults to a MinimaxPlayer
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=-1, high=1, shape=(ROWS, COLS), dtype=np.int8)

        self.render_mode = render_mode
        self.session = GameSession(opponent)
        self.last_opponent_move: Optional[int] = None

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        self.session.reset()
        self.last_opponent_move = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the agent's column, then the opponent's reply.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        column = int(action)
        if self.session.is_over() or not is_column_playable(self.session.board, column):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.session.play_human(column)
        if self.session.state == GameState.OPPONENT_TO_MOVE:
            self.last_opponent_move = self.session.play_opponent()

        state = self.session.state
        reward = self.reward_step
        terminated = state.is_terminal()
        if state == GameState.HUMAN_WON:
            reward = self.reward_win
        elif state == GameState.OPPONENT_WON:
            reward = self.reward_lose
        elif state == GameState.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode over: {state.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """Render the current board according to render_mode."""
        if self.render_mode == "ascii":
            return self.session.board.render()
        if self.render_mode == "human":
            print(self.session.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.session.board.get_state()

    def _get_info(self) -> Dict:
        board = self.session.board
        line = winning_line(board, Player.HUMAN) or winning_line(board, Player.OPPONENT)
        return {
            'valid_moves': legal_moves(board),
            'game_state': self.session.state.name,
            'moves_made': len(self.session.moves_made),
            'winning_line': line,
            'opponent_move': self.last_opponent_move,
        }
