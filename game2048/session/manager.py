"""
Routing of one input stream to one or more game sessions.
"""

import logging
from typing import Callable, NamedTuple

from numpy.random import SeedSequence, default_rng

from game2048.core.gamemove import WIN_VALUE
from game2048.interfaces import InputSource, Renderer, Storage
from game2048.session.game import Game

logger = logging.getLogger(__name__)

MOVE = 'move'
RESTART = 'restart'
KEEP_PLAYING = 'keepPlaying'


class Command(NamedTuple):
    """An input event: ``move`` with a direction, ``restart`` or ``keepPlaying``."""

    kind: str
    direction: int | None = None


class GameManager:
    """
    Fan-out of input events to game sessions.

    ``move`` goes to the controlled session only, while ``restart`` and ``keepPlaying`` reach every
    session.
    """

    def __init__(self, games: list[Game], input_source: InputSource | None = None, control_index: int = 0):
        if not 0 <= control_index < len(games):
            raise ValueError(f'control_index must be in [0, {len(games)}), got {control_index}')

        self.games = games
        self.control_index = control_index
        if input_source is not None:
            self.bind(input_source)

    def bind(self, input_source: InputSource) -> None:
        """Subscribe to the three events of ``input_source``."""
        input_source.on(MOVE, self.move)
        input_source.on(RESTART, self.restart)
        input_source.on(KEEP_PLAYING, self.keep_playing)

    @property
    def controlled(self) -> Game:
        return self.games[self.control_index]

    def move(self, direction: int) -> bool:
        return self.controlled.move(direction)

    def restart(self) -> None:
        for game in self.games:
            game.restart()

    def keep_playing(self) -> None:
        for game in self.games:
            game.keep_playing()

    def dispatch(self, command: Command) -> None:
        """
        Apply a command as if it had been emitted by the input source.

        Raises
        ------
        ValueError
            If the command kind is unknown or a move carries no direction.
        """
        if command.kind == MOVE:
            if command.direction is None:
                raise ValueError('move command requires a direction')
            self.move(command.direction)
        elif command.kind == RESTART:
            self.restart()
        elif command.kind == KEEP_PLAYING:
            self.keep_playing()
        else:
            raise ValueError(f'Unknown command {command.kind!r}')

    @staticmethod
    def create_games(
        renderer_factory: Callable[[int], Renderer],
        storage_factory: Callable[[str], Storage],
        count: int,
        size: int,
        start_tiles: int,
        win_value: int = WIN_VALUE,
        seed: int | None = None,
    ) -> list[Game]:
        """
        Build ``count`` sessions with their own renderer and storage.

        Parameters
        ----------
        renderer_factory : Callable[[int], Renderer]
            Called with the board size.
        storage_factory : Callable[[str], Storage]
            Called with the storage key, ``game1`` to ``game<count>``.
        count : int
            Number of sessions.
        size : int
            Board size.
        start_tiles : int
            Random tiles placed on a fresh board.
        win_value : int, optional
            Tile value that wins the game (default is 2048).
        seed : int, optional
            Seed from which every session's generator is spawned.

        Returns
        -------
        list[Game]
            The sessions, already set up.
        """
        seeds = SeedSequence(seed).spawn(count)
        games = [
            Game(
                renderer_factory(size),
                storage_factory(f'game{index + 1}'),
                start_tiles=start_tiles,
                win_value=win_value,
                rng=default_rng(seeds[index]),
            )
            for index in range(count)
        ]
        logger.debug('Created %d games of size %d', count, size)
        return games
