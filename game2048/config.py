"""
Configuration for a 2048 game setup.
"""

from dataclasses import dataclass
from pathlib import Path

from game2048.core.gamemove import WIN_VALUE

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


@dataclass
class GameConfig:
    """
    Settings shared by every session of a setup.

    Attributes
    ----------
    size : int
        Width and height of each board.
    start_tiles : int
        Random tiles placed on a fresh board.
    win_value : int
        Tile value that wins the game.
    games : int
        Number of side-by-side sessions.
    control_index : int
        Session that receives move events.
    storage_dir : Path | None
        Directory for saved games and best scores. None keeps everything in memory.
    seed : int | None
        Seed for tile spawning, for reproducible games.
    """

    size: int = 4
    start_tiles: int = 2
    win_value: int = WIN_VALUE
    games: int = 1
    control_index: int = 0
    storage_dir: Path | None = None
    seed: int | None = None

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not 0 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f'start_tiles must be in [0, {self.size * self.size}], got {self.start_tiles}')
        if self.win_value < 4 or self.win_value & (self.win_value - 1):
            raise ValueError(f'win_value must be a power of two >= 4, got {self.win_value}')
        if self.games < 1:
            raise ValueError(f'games must be >= 1, got {self.games}')
        if not 0 <= self.control_index < self.games:
            raise ValueError(f'control_index must be in [0, {self.games}), got {self.control_index}')
        if self.storage_dir is not None:
            self.storage_dir = Path(self.storage_dir)
