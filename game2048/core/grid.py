"""
Square grid of tiles for the 2048 game, including cell queries and the saved-state codec.
"""

from typing import Any, Callable, Iterator

from numpy import int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from game2048.core.tile import Position, Tile

# ##>: Module-level generator shared by grids that are not given one.
_GENERATOR = default_rng(PCG64DXSM())


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Grid:
    """
    N×N matrix of cells, each holding at most one tile.

    Cells are stored column-major, ``cells[x][y]``, which is also the layout of the serialized form.
    """

    def __init__(self, size: int, previous_state: list[list[dict | None]] | None = None):
        """
        Initialize an empty grid, or rebuild one from serialized cells.

        Parameters
        ----------
        size : int
            Width and height of the grid.
        previous_state : list[list[dict | None]], optional
            Serialized cells as produced by ``serialize()["cells"]``.

        Raises
        ------
        ValueError
            If the size is not positive or the serialized cells are malformed.
        """
        if size < 1:
            raise ValueError(f'Grid size must be positive, got {size}')
        self.size = size
        self.cells: list[list[Tile | None]] = (
            self._from_state(previous_state) if previous_state is not None else self._empty()
        )

    def _empty(self) -> list[list[Tile | None]]:
        return [[None] * self.size for _ in range(self.size)]

    def _from_state(self, state: list[list[dict | None]]) -> list[list[Tile | None]]:
        if len(state) != self.size or any(len(column) != self.size for column in state):
            raise ValueError(f'Serialized cells are not a {self.size}x{self.size} matrix')

        cells = self._empty()
        for x, column in enumerate(state):
            for y, entry in enumerate(column):
                if entry is None:
                    continue
                value = entry['value']
                coordinates = (entry['position']['x'], entry['position']['y'])
                if not all(_is_int(number) for number in (value, *coordinates)):
                    raise ValueError(f'Non-integer tile entry at ({x}, {y}): {entry!r}')
                position = Position(*coordinates)
                if value < 2 or value & (value - 1):
                    raise ValueError(f'Invalid tile value {value} at ({x}, {y})')
                if position != (x, y):
                    raise ValueError(f'Tile stored at ({x}, {y}) claims position {tuple(position)}')
                cells[x][y] = Tile(value, position)
        return cells

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> 'Grid':
        """
        Rebuild a grid from its ``{size, cells}`` representation.

        Raises
        ------
        ValueError
            If the representation is malformed.
        """
        try:
            size = state['size']
            cells = state['cells']
        except (KeyError, TypeError) as error:
            raise ValueError(f'Malformed grid state: {error!r}') from error
        if not _is_int(size):
            raise ValueError(f'Grid size must be an integer, got {size!r}')
        return cls(size, cells)

    @classmethod
    def from_array(cls, board: ndarray) -> 'Grid':
        """
        Build a grid from a square board of values indexed ``[row, col]``, with 0 for empty cells.

        Parameters
        ----------
        board : ndarray
            Square 2D array of tile values.

        Returns
        -------
        Grid
            A grid where the value at ``board[y, x]`` occupies ``Position(x, y)``.
        """
        rows, cols = board.shape
        if rows != cols:
            raise ValueError(f'Board must be square, got shape {board.shape}')

        grid = cls(rows)
        for y in range(rows):
            for x in range(cols):
                if board[y, x]:
                    grid.insert_tile(Tile(int(board[y, x]), Position(x, y)))
        return grid

    def to_array(self) -> ndarray:
        """
        Board values as a 2D array indexed ``[row, col]``, 0 for empty cells.
        """
        board = zeros((self.size, self.size), dtype=int64)
        for x, y, tile in self.iter_cells():
            if tile:
                board[y, x] = tile.value
        return board

    def iter_cells(self) -> Iterator[tuple[int, int, Tile | None]]:
        for x in range(self.size):
            for y in range(self.size):
                yield x, y, self.cells[x][y]

    def each_cell(self, callback: Callable[[int, int, Tile | None], Any]) -> None:
        """Call ``callback(x, y, tile)`` once for every cell."""
        for x, y, tile in self.iter_cells():
            callback(x, y, tile)

    def available_cells(self) -> list[Position]:
        return [Position(x, y) for x, y, tile in self.iter_cells() if tile is None]

    def random_available_cell(self, rng: Generator | None = None) -> Position:
        """
        Pick one empty cell uniformly at random.

        Parameters
        ----------
        rng : Generator, optional
            Random generator to draw from. Defaults to the module-level generator.

        Returns
        -------
        Position
            The chosen empty cell.

        Raises
        ------
        ValueError
            If the grid has no empty cell. Guard with ``cells_available()``.
        """
        cells = self.available_cells()
        if not cells:
            raise ValueError('No available cell on a full grid')

        rng = rng if rng is not None else _GENERATOR
        return cells[int(rng.integers(len(cells)))]

    def cells_available(self) -> bool:
        return any(tile is None for _, _, tile in self.iter_cells())

    def cell_available(self, cell: tuple[int, int]) -> bool:
        return not self.cell_occupied(cell)

    def cell_occupied(self, cell: tuple[int, int]) -> bool:
        return self.cell_content(cell) is not None

    def cell_content(self, cell: tuple[int, int]) -> Tile | None:
        """Tile at ``cell``, or None for an empty or out-of-bounds cell."""
        if self.within_bounds(cell):
            return self.cells[cell[0]][cell[1]]
        return None

    def insert_tile(self, tile: Tile) -> None:
        self.cells[tile.x][tile.y] = tile

    def remove_tile(self, tile: Tile) -> None:
        self.cells[tile.x][tile.y] = None

    def within_bounds(self, position: tuple[int, int]) -> bool:
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def copy(self) -> 'Grid':
        """Independent grid holding fresh tiles with the same values and positions."""
        return Grid(self.size, self.serialize()['cells'])

    def serialize(self) -> dict:
        """
        Plain representation of the grid.

        Returns
        -------
        dict
            ``{"size": int, "cells": list[list[dict | None]]}`` with cells indexed ``[x][y]``.
        """
        return {
            'size': self.size,
            'cells': [[tile.serialize() if tile else None for tile in column] for column in self.cells],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        return f'Grid(size={self.size}, tiles={sum(1 for _, _, tile in self.iter_cells() if tile)})'
