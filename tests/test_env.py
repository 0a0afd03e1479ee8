"""
Tests for the Gymnasium environment.
"""

import numpy as np
import pytest

from connect4_minimax.game.env import ConnectFourEnv
from connect4_minimax.utils import ROWS, COLS, Player

from conftest import FixedOpponent


@pytest.fixture
def env():
    return ConnectFourEnv(opponent=FixedOpponent([0, 0, 0, 0]))


class TestEnvBasics:
    """Test spaces and reset."""

    def test_reset(self, env):
        observation, info = env.reset(seed=0)
        assert observation.shape == (ROWS, COLS)
        assert observation.dtype == np.int8
        assert env.observation_space.contains(observation)
        assert not observation.any()
        assert info['valid_moves'] == list(range(COLS))
        assert info['game_state'] == 'HUMAN_TO_MOVE'

    def test_action_space(self, env):
        assert env.action_space.n == COLS

    def test_bad_render_mode(self):
        with pytest.raises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")


class TestEnvStep:
    """Test stepping through a game."""

    def test_step_plays_both_sides(self, env):
        env.reset()
        observation, reward, terminated, truncated, info = env.step(3)
        assert observation[ROWS - 1, 3] == Player.HUMAN.value
        assert observation[ROWS - 1, 0] == Player.OPPONENT.value
        assert reward == env.reward_step
        assert not terminated and not truncated
        assert info['opponent_move'] == 0
        assert info['moves_made'] == 2

    def test_step_after_game_over_is_invalid(self, env):
        env.reset()
        for action in (3, 4, 5, 6):
            env.step(action)
        observation, reward, terminated, truncated, info = env.step(2)
        assert reward == env.reward_invalid_move
        assert truncated and not terminated
        assert info['invalid_move'] is True
        assert info['game_state'] == 'HUMAN_WON'
        assert info['moves_made'] == 7
        assert observation[ROWS - 1, 2] == Player.EMPTY.value

    def test_invalid_action(self, env):
        env.reset()
        observation, reward, terminated, truncated, info = env.step(COLS)
        assert reward == env.reward_invalid_move
        assert truncated and not terminated
        assert info['invalid_move'] is True
        assert not observation.any()

    def test_agent_wins(self, env):
        env.reset()
        for action in (3, 4, 5):
            env.step(action)
        observation, reward, terminated, truncated, info = env.step(6)
        assert reward == env.reward_win
        assert terminated
        assert info['game_state'] == 'HUMAN_WON'
        assert info['winning_line'] == [(5, 3), (5, 4), (5, 5), (5, 6)]
        assert info['moves_made'] == 7

    def test_agent_loses(self):
        env = ConnectFourEnv(opponent=FixedOpponent([6, 6, 6, 6]))
        env.reset()
        for action in (0, 1, 0):
            env.step(action)
        _, reward, terminated, _, info = env.step(1)
        assert reward == env.reward_lose
        assert terminated
        assert info['game_state'] == 'OPPONENT_WON'

    def test_default_opponent_replies(self):
        env = ConnectFourEnv()
        env.reset()
        observation, _, _, _, info = env.step(3)
        assert np.count_nonzero(observation) == 2
        assert info['opponent_move'] in range(COLS)


class TestEnvRender:
    """Test rendering."""

    def test_ascii(self):
        env = ConnectFourEnv(render_mode="ascii", opponent=FixedOpponent([0]))
        env.reset()
        env.step(2)
        text = env.render()
        assert text.split("\n")[ROWS - 1] == "X | . | O | . | . | . | ."

    def test_human_prints(self, capsys):
        env = ConnectFourEnv(render_mode="human", opponent=FixedOpponent([]))
        env.reset()
        assert "1 | 2 | 3" in capsys.readouterr().out
