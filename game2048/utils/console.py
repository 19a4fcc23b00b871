"""Plain-text renderer writing the board to a stream."""

import sys
from typing import TextIO

from game2048.core.grid import Grid
from game2048.interfaces import GameStatus


class ConsoleRenderer:
    """
    Renderer printing each board as tab-separated rows followed by the score line.
    """

    def __init__(self, size: int, stream: TextIO | None = None):
        self.size = size
        self.stream = stream if stream is not None else sys.stdout

    def draw(self, grid: Grid, status: GameStatus) -> None:
        for row in grid.to_array().tolist():
            print(' \t'.join(str(value) if value else '.' for value in row), file=self.stream)

        print(f'score={status.score} best={status.best_score}', file=self.stream)
        if status.over:
            print('Game over!', file=self.stream)
        elif status.won and status.terminated:
            print('You win!', file=self.stream)

    def continue_game(self) -> None:
        print('', file=self.stream)
