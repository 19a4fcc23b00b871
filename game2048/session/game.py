"""A single 2048 game session wired to a renderer and a storage."""

import logging

from numpy.random import Generator, default_rng

from game2048.config import TILE_SPAWN_PROBS
from game2048.core.gamemove import WIN_VALUE, apply_move, moves_available
from game2048.core.grid import Grid
from game2048.core.tile import Tile
from game2048.interfaces import GameStatus, Renderer, Storage

logger = logging.getLogger(__name__)

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


class Game:
    """
    2048 game session.

    Holds the grid, score and status flags, applies moves, and pushes every accepted change to
    its renderer and storage.
    """

    def __init__(
        self,
        renderer: Renderer,
        storage: Storage,
        start_tiles: int = 2,
        win_value: int = WIN_VALUE,
        rng: Generator | None = None,
    ):
        """
        Initialize the session and set up its board.

        Parameters
        ----------
        renderer : Renderer
            Receives the grid after setup and after every move that changed the board.
        storage : Storage
            Holds the saved game and the best score.
        start_tiles : int, optional
            Random tiles placed on a fresh board (default is 2).
        win_value : int, optional
            Tile value that wins the game (default is 2048).
        rng : Generator, optional
            Random generator for tile spawning.
        """
        self.renderer = renderer
        self.storage = storage
        self.start_tiles = start_tiles
        self.win_value = win_value
        self.rng = rng if rng is not None else default_rng()

        self.grid: Grid = Grid(renderer.size)
        self.score = 0
        self.over = False
        self.won = False
        self.keep_playing_enabled = False

        self.setup()

    def restart(self) -> None:
        logger.info('Restarting game')
        self.storage.clear_game_state()
        self.renderer.continue_game()
        self.setup()

    def keep_playing(self) -> None:
        """
        Keep playing after winning, allowing tiles past the winning value.

        Notes
        -----
        A winning move that ends the game is not also a loss. If that move left the board stuck,
        the game is declared over here.
        """
        self.keep_playing_enabled = True
        if not self.over and not self.moves_available():
            logger.info('Game over with score %d', self.score)
            self.over = True
        self.renderer.continue_game()
        self.draw()

    def is_terminated(self) -> bool:
        """Lost, or won without choosing to keep playing."""
        return self.over or (self.won and not self.keep_playing_enabled)

    def setup(self) -> None:
        """Restore the saved game if there is a valid one, else start a fresh board."""
        previous_state = self.storage.get_game_state()

        if previous_state and self._restore(previous_state):
            logger.debug('Restored game with score %d', self.score)
        else:
            self.grid = Grid(self.renderer.size)
            self.score = 0
            self.over = False
            self.won = False
            self.keep_playing_enabled = False
            self.add_start_tiles()

        self.draw()

    def _restore(self, state: dict) -> bool:
        try:
            grid = Grid.from_state(state['grid'])
            score = state['score']
            over, won, keep_playing = state['over'], state['won'], state['keepPlaying']
            if not isinstance(score, int) or isinstance(score, bool):
                raise ValueError(f'score must be an integer, got {score!r}')
            if not all(isinstance(flag, bool) for flag in (over, won, keep_playing)):
                raise ValueError('over, won and keepPlaying must be booleans')
        except (KeyError, TypeError, ValueError, OverflowError) as error:
            logger.warning('Discarding malformed saved game: %s', error)
            return False

        if grid.size != self.renderer.size:
            logger.warning('Discarding saved game of size %d for a board of size %d', grid.size, self.renderer.size)
            return False
        if score < 0:
            logger.warning('Discarding saved game with negative score %d', score)
            return False

        self.grid = grid
        self.score = score
        self.over = over
        self.won = won
        self.keep_playing_enabled = keep_playing
        return True

    def add_start_tiles(self) -> None:
        for _ in range(self.start_tiles):
            self.add_random_tile()

    def add_random_tile(self) -> Tile | None:
        """
        Add a 2 (90%) or a 4 (10%) in a random empty cell.

        Returns
        -------
        Tile | None
            The new tile, or None when the grid is full.
        """
        if not self.grid.cells_available():
            return None

        value = int(self.rng.choice(_TILE_VALUES, p=_TILE_PROBS))
        tile = Tile(value, self.grid.random_available_cell(self.rng))
        self.grid.insert_tile(tile)
        return tile

    def moves_available(self) -> bool:
        return moves_available(self.grid)

    def move(self, direction: int) -> bool:
        """
        Slide the board in a direction.

        Parameters
        ----------
        direction : int
            The direction to apply (0: up, 1: right, 2: down, 3: left).

        Returns
        -------
        bool
            True if the board changed, False otherwise.

        Notes
        -----
        - Nothing happens once the game is terminated.
        - A board that does not change spawns no tile and is not drawn nor saved.
        """
        if self.is_terminated():
            return False

        result = apply_move(self.grid, direction, win_value=self.win_value)
        self.score += result.score
        newly_won = result.won and not self.won
        if newly_won:
            logger.info('Reached %d with score %d', self.win_value, self.score)
            self.won = True

        if not result.moved:
            return False

        self.add_random_tile()

        # ##: A win that ends the game is never also a loss.
        if not (newly_won and not self.keep_playing_enabled) and not self.moves_available():
            logger.info('Game over with score %d', self.score)
            self.over = True

        logger.debug('Moved %d, score %d', direction, self.score)
        self.draw()
        return True

    def draw(self) -> None:
        """Update the best score, save or clear the game, and send the grid to the renderer."""
        if self.storage.get_best_score() < self.score:
            self.storage.set_best_score(self.score)

        # ##>: A lost game is not kept, a won one is.
        if self.over:
            self.storage.clear_game_state()
        else:
            self.storage.set_game_state(self.serialize())

        self.renderer.draw(
            self.grid,
            GameStatus(
                score=self.score,
                over=self.over,
                won=self.won,
                best_score=self.storage.get_best_score(),
                terminated=self.is_terminated(),
            ),
        )

    def serialize(self) -> dict:
        return {
            'grid': self.grid.serialize(),
            'score': self.score,
            'over': self.over,
            'won': self.won,
            'keepPlaying': self.keep_playing_enabled,
        }
