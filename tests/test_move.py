from unittest import TestCase, main

import numpy as np
from numpy import array

from game2048.core.gamemove import (
    Direction,
    apply_move,
    build_traversals,
    find_farthest_position,
    get_vector,
    legal_directions,
    moves_available,
    tile_matches_available,
)
from game2048.core.grid import Grid
from game2048.core.tile import Position

generator = np.random.default_rng(42)


def generate_random_board(size: int = 4) -> np.ndarray:
    """Generate a random 2048 game board."""
    board = np.zeros((size, size), dtype=np.int64)
    num_tiles = generator.integers(1, size * size + 1)
    tile_values = generator.choice([2, 4, 8, 16, 32], size=num_tiles)
    indices = generator.choice(size * size, size=num_tiles, replace=False)
    board.flat[indices] = tile_values
    return board


class TestTraversal(TestCase):
    """Test vectors, traversal order and farthest-position search."""

    def test_vectors(self):
        """Directions map to unit vectors in (x, y)."""
        self.assertEqual(get_vector(Direction.UP), (0, -1))
        self.assertEqual(get_vector(1), (1, 0))
        self.assertEqual(get_vector(2), (0, 1))
        self.assertEqual(get_vector(Direction.LEFT), (-1, 0))

    def test_unknown_direction(self):
        """Directions outside 0..3 are rejected."""
        with self.assertRaises(ValueError):
            get_vector(4)

    def test_build_traversals(self):
        """Axes moving towards +1 are traversed in reverse."""
        self.assertEqual(build_traversals((1, 0), 4), ([3, 2, 1, 0], [0, 1, 2, 3]))
        self.assertEqual(build_traversals((0, 1), 4), ([0, 1, 2, 3], [3, 2, 1, 0]))
        self.assertEqual(build_traversals((-1, 0), 3), ([0, 1, 2], [0, 1, 2]))
        self.assertEqual(build_traversals((0, -1), 3), ([0, 1, 2], [0, 1, 2]))

    def test_farthest_position_to_wall(self):
        """Without obstacles the tile reaches the edge and next is out of bounds."""
        grid = Grid.from_array(array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]))
        farthest, following = find_farthest_position(grid, (3, 0), (-1, 0))

        self.assertEqual(farthest, Position(0, 0))
        self.assertEqual(following, Position(-1, 0))

    def test_farthest_position_blocked(self):
        """An occupied cell stops the search and becomes next."""
        grid = Grid.from_array(array([[4, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]))
        farthest, following = find_farthest_position(grid, (3, 0), (-1, 0))

        self.assertEqual(farthest, Position(1, 0))
        self.assertEqual(following, Position(0, 0))

    def test_farthest_position_already_at_edge(self):
        """A tile against the wall stays in its own cell."""
        grid = Grid.from_array(array([[2, 0], [0, 0]]))
        farthest, following = find_farthest_position(grid, (0, 0), (0, -1))

        self.assertEqual(farthest, Position(0, 0))
        self.assertEqual(following, Position(0, -1))


class TestApplyMove(TestCase):
    """Test sliding, merging and scoring."""

    def assert_move(self, board, direction, expected, score):
        grid = Grid.from_array(array(board))
        result = apply_move(grid, direction)

        np.testing.assert_array_equal(grid.to_array(), array(expected))
        self.assertEqual(result.score, score)
        return grid, result

    def test_merge_left(self):
        """Two equal tiles merge into one at the left edge."""
        _, result = self.assert_move(
            [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            Direction.LEFT,
            [[4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            score=4,
        )
        self.assertTrue(result.moved)
        self.assertFalse(result.won)

    def test_pairs_merge_once(self):
        """Four equal tiles give two merges, not one chain."""
        self.assert_move(
            [[2, 2, 2, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            Direction.LEFT,
            [[4, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            score=8,
        )

    def test_no_chain_merge(self):
        """A freshly merged tile does not merge again in the same move."""
        self.assert_move(
            [[2, 2, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            Direction.LEFT,
            [[4, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            score=4,
        )

    def test_merge_nearest_edge_first(self):
        """Of three equal tiles, the two nearest the destination edge merge."""
        self.assert_move(
            [[2, 2, 2, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            Direction.RIGHT,
            [[0, 0, 2, 4], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            score=4,
        )

    def test_vertical_moves(self):
        """Up and down merge along columns."""
        board = [[2, 0, 0, 0], [2, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0]]
        self.assert_move(
            board, Direction.UP, [[4, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], score=4
        )
        self.assert_move(
            board, Direction.DOWN, [[0, 0, 0, 0], [0, 0, 0, 0], [4, 0, 0, 0], [4, 0, 0, 0]], score=4
        )

    def test_unchanged_board(self):
        """Pushing against the wall without merges moves nothing."""
        board = [[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]]
        _, result = self.assert_move(board, Direction.LEFT, board, score=0)
        self.assertFalse(result.moved)

    def test_win_value(self):
        """Creating the winning value is reported."""
        _, result = self.assert_move(
            [[1024, 1024, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            Direction.LEFT,
            [[2048, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
            score=2048,
        )
        self.assertTrue(result.won)

    def test_custom_win_value(self):
        """The winning value is configurable."""
        grid = Grid.from_array(array([[4, 4], [0, 0]]))
        self.assertTrue(apply_move(grid, Direction.LEFT, win_value=8).won)

    def test_merge_provenance(self):
        """Merged tiles record their sources until the next move starts."""
        grid = Grid.from_array(array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [8, 0, 0, 0]]))
        apply_move(grid, Direction.LEFT)

        merged = grid.cell_content((0, 0))
        self.assertIsNotNone(merged.merged_from)
        self.assertEqual(sorted(source.value for source in merged.merged_from), [2, 2])
        self.assertEqual({source.position for source in merged.merged_from}, {Position(0, 0), Position(1, 0)})

        # ##>: The next move clears provenance and saves the previous position.
        apply_move(grid, Direction.DOWN)
        moved = grid.cell_content((0, 2))
        self.assertIsNone(moved.merged_from)
        self.assertEqual(moved.previous_position, Position(0, 0))

    def test_previous_position(self):
        """Tiles remember where they were before the move."""
        grid = Grid.from_array(array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]))
        apply_move(grid, Direction.LEFT)

        tile = grid.cell_content((0, 0))
        self.assertEqual(tile.previous_position, Position(3, 0))
        self.assertEqual(tile.position, Position(0, 0))

    def test_value_conservation(self):
        """Merges conserve the total value and score the created tiles."""
        for _ in range(100):
            board = generate_random_board()
            for direction in Direction:
                grid = Grid.from_array(board)
                result = apply_move(grid, direction)

                created = sum(tile.value for _, _, tile in grid.iter_cells() if tile and tile.merged_from)
                self.assertEqual(grid.to_array().sum(), board.sum())
                self.assertEqual(result.score, created)
                for _, _, tile in grid.iter_cells():
                    if tile and tile.merged_from:
                        # ##>: Sources are original tiles, never products of this move.
                        self.assertTrue(all(source.value * 2 == tile.value for source in tile.merged_from))


class TestMovesAvailable(TestCase):
    """Test detection of remaining moves."""

    def test_full_board_without_matches(self):
        """A full board with no equal neighbours has no move."""
        grid = Grid.from_array(
            array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        )
        self.assertFalse(grid.cells_available())
        self.assertFalse(tile_matches_available(grid))
        self.assertFalse(moves_available(grid))
        self.assertEqual(legal_directions(grid), [])

    def test_full_board_with_vertical_match(self):
        """Equal tiles in one column keep the game going."""
        grid = Grid.from_array(array([[2, 4], [2, 8]]))
        self.assertTrue(tile_matches_available(grid))
        self.assertTrue(moves_available(grid))

    def test_empty_cell(self):
        """An empty cell keeps the game going."""
        grid = Grid.from_array(array([[2, 4], [8, 0]]))
        self.assertFalse(tile_matches_available(grid))
        self.assertTrue(moves_available(grid))

    def test_legal_directions(self):
        """Only directions that change the board are legal, and the grid is untouched."""
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        grid = Grid.from_array(board)

        self.assertEqual(set(legal_directions(grid)), {Direction.UP, Direction.RIGHT, Direction.DOWN})
        np.testing.assert_array_equal(grid.to_array(), board)


if __name__ == '__main__':
    main()
