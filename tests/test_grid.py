import unittest

import numpy as np

from tetris_engine.game import GameGrid, IllegalPlacementError, PieceType, count_holes, max_height, shape_for


O = shape_for(PieceType.O)
I = shape_for(PieceType.I)
T = shape_for(PieceType.T)


class CanPlaceTests(unittest.TestCase):
    def setUp(self):
        self.grid = GameGrid(10, 20)

    def test_inside_empty_board(self):
        self.assertTrue(self.grid.can_place(O, 0, 0))
        self.assertTrue(self.grid.can_place(O, 8, 18))

    def test_rejects_each_side(self):
        self.assertFalse(self.grid.can_place(O, -1, 5))
        self.assertFalse(self.grid.can_place(O, 9, 5))
        self.assertFalse(self.grid.can_place(O, 4, 19))
        self.assertFalse(self.grid.can_place(O, 4, -1))

    def test_empty_corners_ignore_settled_cells(self):
        # T's empty corners do not collide with settled cells
        self.grid.grid[0, 0] = 3
        self.assertTrue(self.grid.can_place(T, 0, 0))

    def test_rejects_overlap(self):
        self.grid.grid[19, 5] = 1
        self.assertFalse(self.grid.can_place(O, 4, 18))
        self.assertTrue(self.grid.can_place(O, 6, 18))


class LockTests(unittest.TestCase):
    def test_lock_writes_type_id(self):
        grid = GameGrid(10, 20)
        grid.lock(T, 3, 18, int(PieceType.T))
        self.assertEqual(int(np.count_nonzero(grid.grid)), 4)
        self.assertEqual(grid.grid[18, 4], 6)
        self.assertEqual(grid.grid[18, 3], 0)
        np.testing.assert_array_equal(grid.grid[19, 3:6], [6, 6, 6])

    def test_lock_without_room_is_an_error(self):
        grid = GameGrid(10, 20)
        grid.grid[19, 0] = 2
        with self.assertRaises(IllegalPlacementError):
            grid.lock(O, 0, 18, 4)
        with self.assertRaises(IllegalPlacementError):
            grid.lock(I, 8, 0, 1)

    def test_lock_then_clear_on_non_full_board(self):
        grid = GameGrid(10, 20)
        grid.fill_rows([19], value=2, gap=0)
        before = grid.clone_state()
        grid.lock(O, 4, 17, 4)
        self.assertEqual(grid.clear_full_rows(), 0)
        changed = np.argwhere(grid.grid != before)
        self.assertEqual(sorted(map(tuple, changed)), [(17, 4), (17, 5), (18, 4), (18, 5)])


class ClearRowsTests(unittest.TestCase):
    def test_no_full_rows(self):
        grid = GameGrid(4, 5)
        grid.fill_rows([4], gap=2)
        self.assertEqual(grid.clear_full_rows(), 0)
        self.assertEqual(grid.grid.shape, (5, 4))

    def test_non_adjacent_rows_removed_and_order_kept(self):
        grid = GameGrid(4, 6)
        grid.grid[:] = [
            [0, 0, 0, 0],
            [5, 0, 0, 0],
            [1, 1, 1, 1],
            [0, 6, 0, 0],
            [2, 2, 2, 2],
            [0, 0, 7, 0],
        ]
        self.assertEqual(grid.clear_full_rows(), 2)
        np.testing.assert_array_equal(
            grid.grid,
            [
                [0, 0, 0, 0],
                [0, 0, 0, 0],
                [0, 0, 0, 0],
                [5, 0, 0, 0],
                [0, 6, 0, 0],
                [0, 0, 7, 0],
            ],
        )

    def test_four_rows(self):
        grid = GameGrid(10, 20)
        grid.fill_rows(range(16, 20), value=1)
        grid.grid[15, 3] = 4
        self.assertEqual(grid.clear_full_rows(), 4)
        self.assertEqual(grid.grid.shape, (20, 10))
        self.assertEqual(grid.grid[19, 3], 4)
        self.assertEqual(int(np.count_nonzero(grid.grid)), 1)


class FeatureTests(unittest.TestCase):
    def test_height_and_holes(self):
        grid = GameGrid(4, 5)
        self.assertEqual(max_height(grid.grid), 0)
        grid.grid[2, 1] = 1
        grid.grid[4, 0] = 1
        self.assertEqual(max_height(grid.grid), 3)
        self.assertEqual(count_holes(grid.grid), 2)

    def test_copy_is_independent(self):
        grid = GameGrid(4, 5)
        other = grid.copy()
        other.grid[0, 0] = 1
        self.assertEqual(grid.grid[0, 0], 0)


if __name__ == "__main__":
    unittest.main()
