"""
Tile and position primitives for the 2048 grid.
"""

from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """Cell coordinates, 0-indexed, with ``x`` the column and ``y`` the row."""

    x: int
    y: int


class TileSnapshot(NamedTuple):
    """Frozen copy of a tile taken when it was consumed by a merge."""

    value: int
    position: Position


@dataclass
class Tile:
    """
    A numbered tile occupying one grid cell.

    Attributes
    ----------
    value : int
        Power of two, starting at 2.
    position : Position
        Cell the tile currently occupies.
    previous_position : Position | None
        Position saved at the start of the last move. Only used by renderers.
    merged_from : tuple[TileSnapshot, TileSnapshot] | None
        Source tiles when this tile was produced by a merge during the current move.
    """

    value: int
    position: Position
    previous_position: Position | None = None
    merged_from: tuple[TileSnapshot, TileSnapshot] | None = None

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def save_position(self) -> None:
        self.previous_position = Position(*self.position)

    def update_position(self, position: tuple[int, int]) -> None:
        self.position = Position(*position)

    def snapshot(self) -> TileSnapshot:
        return TileSnapshot(self.value, Position(*self.position))

    def serialize(self) -> dict:
        """
        Plain representation used by the saved game state.

        Returns
        -------
        dict
            ``{"value": int, "position": {"x": int, "y": int}}``.
        """
        return {'value': int(self.value), 'position': {'x': int(self.x), 'y': int(self.y)}}
