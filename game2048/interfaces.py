"""
Contracts of the collaborators a game session calls out to: storage, renderer and input source.
"""

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from game2048.core.grid import Grid


@dataclass
class GameStatus:
    """Status sent to the renderer alongside the grid."""

    score: int
    over: bool
    won: bool
    best_score: int
    terminated: bool


class Storage(Protocol):
    """Persistence for one session's saved game and best score."""

    def get_game_state(self) -> dict | None:
        ...

    def set_game_state(self, state: dict) -> None:
        ...

    def clear_game_state(self) -> None:
        ...

    def get_best_score(self) -> int:
        ...

    def set_best_score(self, score: int) -> None:
        ...


class Renderer(Protocol):
    """Presentation of one session's board."""

    size: int

    def draw(self, grid: Grid, status: GameStatus) -> None:
        ...

    def continue_game(self) -> None:
        ...


class InputSource(Protocol):
    """Emitter of ``move``, ``restart`` and ``keepPlaying`` events."""

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        ...
