"""
Move resolution for the 2048 game: traversal order, farthest-position search, merging and
detection of remaining moves.
"""

from dataclasses import dataclass
from enum import IntEnum

from game2048.core.grid import Grid
from game2048.core.tile import Position, Tile

WIN_VALUE = 2048


class Direction(IntEnum):
    """Move directions, numbered as emitted by input sources."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


# ##: Unit vectors (x, y) for each direction.
VECTORS: dict[Direction, Position] = {
    Direction.UP: Position(0, -1),
    Direction.RIGHT: Position(1, 0),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
}


@dataclass
class MoveResult:
    """
    Outcome of applying one direction to a grid.

    Attributes
    ----------
    moved : bool
        Whether at least one tile left its cell.
    score : int
        Sum of the values created by merges.
    won : bool
        Whether a merge produced the winning value.
    """

    moved: bool = False
    score: int = 0
    won: bool = False


def get_vector(direction: int) -> Position:
    """
    Unit vector for a direction.

    Raises
    ------
    ValueError
        If ``direction`` is not one of 0 (up), 1 (right), 2 (down), 3 (left).
    """
    return VECTORS[Direction(direction)]


def build_traversals(vector: tuple[int, int], size: int) -> tuple[list[int], list[int]]:
    """
    Column and row orders to visit so that tiles nearest the destination edge go first.

    Parameters
    ----------
    vector : tuple[int, int]
        Direction of travel.
    size : int
        Grid size.

    Returns
    -------
    tuple[list[int], list[int]]
        The x traversal and the y traversal.
    """
    traversal_x = list(range(size))
    traversal_y = list(range(size))

    # ##: Always traverse from the farthest cell in the chosen direction.
    if vector[0] == 1:
        traversal_x.reverse()
    if vector[1] == 1:
        traversal_y.reverse()
    return traversal_x, traversal_y


def find_farthest_position(grid: Grid, cell: tuple[int, int], vector: tuple[int, int]) -> tuple[Position, Position]:
    """
    Walk from ``cell`` along ``vector`` while the next cell is in bounds and empty.

    Returns
    -------
    farthest : Position
        Last empty cell reached, or ``cell`` itself when blocked immediately.
    next : Position
        First cell past ``farthest``: occupied or out of bounds. Used to check for a merge.
    """
    previous = Position(*cell)
    following = Position(previous.x + vector[0], previous.y + vector[1])
    while grid.within_bounds(following) and grid.cell_available(following):
        previous = following
        following = Position(previous.x + vector[0], previous.y + vector[1])
    return previous, following


def prepare_tiles(grid: Grid) -> None:
    """Save every tile position and drop merge provenance from the previous move."""

    def _prepare(_x: int, _y: int, tile: Tile | None) -> None:
        if tile:
            tile.merged_from = None
            tile.save_position()

    grid.each_cell(_prepare)


def move_tile(grid: Grid, tile: Tile, cell: tuple[int, int]) -> None:
    grid.remove_tile(tile)
    tile.update_position(cell)
    grid.insert_tile(tile)


def positions_equal(first: tuple[int, int], second: tuple[int, int]) -> bool:
    return first[0] == second[0] and first[1] == second[1]


def apply_move(grid: Grid, direction: int, win_value: int = WIN_VALUE) -> MoveResult:
    """
    Slide and merge every tile of ``grid`` in place.

    Parameters
    ----------
    grid : Grid
        The grid to update. **Modified in-place.**
    direction : int
        The direction to apply (0: up, 1: right, 2: down, 3: left).
    win_value : int, optional
        Tile value that wins the game (default is 2048).

    Returns
    -------
    MoveResult
        Whether tiles moved, the score gained and whether the winning value was created.

    Notes
    -----
    - No tile is spawned here; that is left to the caller.
    - A tile created by a merge cannot merge again during the same move.
    """
    vector = get_vector(direction)
    traversal_x, traversal_y = build_traversals(vector, grid.size)
    result = MoveResult()

    prepare_tiles(grid)

    for x in traversal_x:
        for y in traversal_y:
            cell = Position(x, y)
            tile = grid.cell_content(cell)
            if tile is None:
                continue

            farthest, following = find_farthest_position(grid, cell, vector)
            neighbour = grid.cell_content(following)

            if neighbour is not None and neighbour.value == tile.value and neighbour.merged_from is None:
                merged = Tile(tile.value * 2, following)
                merged.merged_from = (tile.snapshot(), neighbour.snapshot())

                grid.insert_tile(merged)
                grid.remove_tile(tile)

                # ##>: Converge the consumed tile onto the merge cell for movement detection.
                tile.update_position(following)

                result.score += merged.value
                if merged.value == win_value:
                    result.won = True
            else:
                move_tile(grid, tile, farthest)

            if not positions_equal(cell, tile.position):
                result.moved = True

    return result


def tile_matches_available(grid: Grid) -> bool:
    """Check whether any tile has an orthogonal neighbour of the same value."""
    for x, y, tile in grid.iter_cells():
        if tile is None:
            continue
        for vector in VECTORS.values():
            other = grid.cell_content((x + vector.x, y + vector.y))
            if other is not None and other.value == tile.value:
                return True
    return False


def moves_available(grid: Grid) -> bool:
    return grid.cells_available() or tile_matches_available(grid)


def legal_directions(grid: Grid) -> list[Direction]:
    """
    Directions that would change the board.

    Notes
    -----
    Each direction is tried on a copy of the grid, so ``grid`` is left untouched.
    """
    return [direction for direction in Direction if apply_move(grid.copy(), direction).moved]
