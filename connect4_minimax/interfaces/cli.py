"""
cli.py - Command-line interface for playing Connect Four against minimax

This module provides the interactive game loop plus two helper commands:
analyzing a given position and benchmarking the engine.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional

from connect4_minimax.ai.minimax import MinimaxPlayer
from connect4_minimax.debug import debug, DebugLevel
from connect4_minimax.game.board import Board, render_board
from connect4_minimax.game.rules import (drop_disc, game_outcome, has_connect_four,
                                         is_column_playable, is_terminal, legal_moves)
from connect4_minimax.game.session import GameSession, GameState
from connect4_minimax.utils import ROWS, COLS, Player

CLEAR_SCREEN = "\033[2J\033[H"
QUIT_COMMANDS = ('q', 'quit', 'exit')


def parse_column(text: str) -> int:
    """
    Convert a 1-based column typed by the player to a 0-based index.

    Raises:
        ValueError: If the text is not an integer between 1 and COLS
    """
    column = int(text.strip())
    if not (1 <= column <= COLS):
        raise ValueError(f"Column must be between 1 and {COLS}")
    return column - 1


def parse_position(text: str) -> Board:
    """
    Parse ROWS*COLS comma-separated cell values (top row first) into a board.

    Raises:
        ValueError: If the string is malformed or the position is impossible
    """
    try:
        values = [int(value) for value in text.split(',')]
    except ValueError:
        raise ValueError("Position must be comma-separated integers") from None

    if len(values) != ROWS * COLS:
        raise ValueError(f"Position string must have {ROWS * COLS} values, got {len(values)}")

    return Board.from_rows(values[row * COLS:(row + 1) * COLS] for row in range(ROWS))


class SimpleCLI:
    """Command-line front end around GameSession."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            input_func: Reads one line given a prompt
            output_func: Writes one message
        """
        self.input = input_func
        self.output = output_func
        self.args = None
        self.session = GameSession()

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(description='Play Connect Four against a minimax opponent')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--log-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', type=str, default=None, help='Also log to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--no-clear', action='store_true',
                                 help='Do not clear the screen between moves')

        analyze_parser = subparsers.add_parser('analyze', help='Show the best opponent move for a position')
        analyze_parser.add_argument('--position', type=str, required=True,
                                    help=f'{ROWS * COLS} comma-separated cells, top row first '
                                         '(0 empty, 1 human, -1 opponent)')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark engine performance')
        benchmark_parser.add_argument('--iterations', type=int, default=100,
                                      help='Number of iterations for benchmarking')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.log_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit status
        """
        if self.args is None:
            self.parse_args(argv)

        command = self.args.command or 'play'
        if command == 'play':
            self.play_game(clear=not getattr(self.args, 'no_clear', False))
            return 0
        if command == 'analyze':
            return self.analyze_position(self.args.position)
        if command == 'benchmark':
            self.benchmark(self.args.iterations)
            return 0

        self.output(f"Unknown command: {command}")
        return 1

    def show_board(self, clear: bool) -> None:
        if clear:
            self.output(CLEAR_SCREEN)
        self.output(render_board(self.session.board) + "\n")

    def play_game(self, clear: bool = True) -> Optional[GameState]:
        """
        Play one game, human first.

        Returns:
            The final state, or None if the player quit
        """
        self.session.reset()
        self.show_board(clear)

        while not self.session.is_over():
            if self.session.state == GameState.HUMAN_TO_MOVE:
                column = self.get_human_move()
                if column is None:
                    self.output("Quitting game.")
                    return None
                self.session.play_human(column)
            else:
                self.output("Bot is making a move...")
                self.session.play_opponent()
            self.show_board(clear)

        state = self.session.state
        if state == GameState.HUMAN_WON:
            self.output("You win!")
        elif state == GameState.OPPONENT_WON:
            self.output("Bot wins!")
        else:
            self.output("It's a draw!")
        return state

    def get_human_move(self) -> Optional[int]:
        """
        Prompt until the player enters a playable column.

        Returns:
            0-based column, or None if the player quits or input ends
        """
        while True:
            try:
                text = self.input(f"Enter your move (1-{COLS}): ")
            except (EOFError, KeyboardInterrupt):
                return None

            if text.strip().lower() in QUIT_COMMANDS:
                return None

            try:
                column = parse_column(text)
            except ValueError:
                self.output("Invalid move! Try again.")
                continue

            if not is_column_playable(self.session.board, column):
                self.output("Invalid move! Try again.")
                continue

            return column

    def analyze_position(self, position: str) -> int:
        """Print a position, its outcome, and the opponent's best reply."""
        try:
            board = parse_position(position)
        except ValueError as e:
            self.output(f"Error: {e}")
            return 1

        self.output(render_board(board))
        outcome = game_outcome(board)
        self.output(f"Outcome: {outcome.name}")
        if outcome.is_game_over():
            return 0

        player = MinimaxPlayer()
        column = player.get_move(board)
        self.output(f"Best opponent move: column {column + 1} "
                    f"({player.nodes_evaluated} nodes searched)")
        return 0

    def benchmark(self, iterations: int) -> None:
        """Time board copies, win checks, and full searches."""
        iterations = max(1, iterations)
        self.output(f"Running benchmark with {iterations} iterations...")
        rng = random.Random(0)

        board = Board()
        debug.start_timer("copy")
        for _ in range(iterations):
            board.copy()
        copy_time = debug.end_timer("copy") or 0.0
        self.output(f"Board copy: {copy_time / iterations * 1000:.6f} ms per copy")

        boards = [self._random_board(rng) for _ in range(iterations)]
        debug.start_timer("win_check")
        for board in boards:
            has_connect_four(board, Player.HUMAN)
            has_connect_four(board, Player.OPPONENT)
        check_time = debug.end_timer("win_check") or 0.0
        self.output(f"Win check: {check_time / iterations * 1000:.6f} ms per board")

        searches = max(1, iterations // 10)
        player = MinimaxPlayer()
        nodes = 0
        debug.start_timer("search_total")
        for board in boards[:searches]:
            if not is_terminal(board):
                player.get_move(board)
                nodes += player.nodes_evaluated
        search_time = debug.end_timer("search_total") or 0.0
        self.output(f"Search: {search_time / searches * 1000:.3f} ms per move, "
                    f"{nodes} nodes in {searches} searches")

    @staticmethod
    def _random_board(rng: random.Random) -> Board:
        board = Board()
        player = Player.HUMAN
        for _ in range(rng.randint(4, 20)):
            if is_terminal(board):
                break
            board = drop_disc(board, rng.choice(legal_moves(board)), player)
            player = player.other()
        return board


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
