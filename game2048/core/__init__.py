# -*- coding: utf-8 -*-
"""
This module provides the grid model and move resolution of the 2048 game.

It includes tiles and positions, the grid with its cell queries and saved-state codec, and the
functions that slide and merge tiles, detect remaining moves and list legal directions.
"""

from .gamemove import (
    VECTORS,
    WIN_VALUE,
    Direction,
    MoveResult,
    apply_move,
    build_traversals,
    find_farthest_position,
    get_vector,
    legal_directions,
    moves_available,
    tile_matches_available,
)
from .grid import Grid
from .tile import Position, Tile, TileSnapshot

__all__ = [
    "Direction",
    "Grid",
    "MoveResult",
    "Position",
    "Tile",
    "TileSnapshot",
    "VECTORS",
    "WIN_VALUE",
    "apply_move",
    "build_traversals",
    "find_farthest_position",
    "get_vector",
    "legal_directions",
    "moves_available",
    "tile_matches_available",
]
