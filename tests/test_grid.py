import unittest

import numpy as np

from retro_tetris.game import GameGrid


class TestPlacement(unittest.TestCase):
    def setUp(self):
        self.g = GameGrid(10, 20)
        self.g.grid[19, 5] = 1

    def test_bounds(self):
        g = self.g
        self.assertTrue(g.is_valid_placement([(0, 0), (9, 19)]))
        self.assertFalse(g.is_valid_placement([(-1, 0)]))
        self.assertFalse(g.is_valid_placement([(10, 0)]))
        self.assertFalse(g.is_valid_placement([(0, 20)]))

    def test_overlap(self):
        self.assertFalse(self.g.is_valid_placement([(4, 19), (5, 19)]))
        self.assertTrue(self.g.is_valid_placement([(5, 18)]))

    def test_above_board_only_checks_columns(self):
        g = self.g
        g.grid[0, 3] = 1
        self.assertTrue(g.is_valid_placement([(3, -1), (3, -2)]))
        self.assertFalse(g.is_valid_placement([(-1, -1)]))
        self.assertFalse(g.is_valid_placement([(10, -3)]))

    def test_empty_cell_list_is_valid(self):
        self.assertTrue(self.g.is_valid_placement([]))


class TestLock(unittest.TestCase):
    def test_lock_drops_cells_above_board(self):
        g = GameGrid(4, 3)
        g.lock([(0, -1), (1, 0), (2, 2)], 7)
        self.assertEqual(7, g.grid[0, 1])
        self.assertEqual(7, g.grid[2, 2])
        self.assertEqual(2, int(np.count_nonzero(g.grid)))
        self.assertTrue(g.is_filled(1, 0))
        self.assertFalse(g.is_filled(0, 0))
        self.assertFalse(g.is_filled(0, -1))

    def test_lock_drops_cells_outside_columns(self):
        g = GameGrid(4, 3)
        g.lock([(-1, 2), (4, 2), (0, 3), (1, 1)], 5)
        self.assertEqual(5, g.grid[1, 1])
        self.assertEqual(1, int(np.count_nonzero(g.grid)))


class TestClearFullLines(unittest.TestCase):
    def test_no_full_rows(self):
        g = GameGrid(4, 3)
        g.grid[2, :3] = 1
        before = g.clone_state()
        self.assertEqual(0, g.clear_full_lines())
        np.testing.assert_array_equal(before, g.grid)

    def test_keeps_order_and_size(self):
        g = GameGrid(4, 5)
        g.grid[0, 0] = 1
        g.grid[1, :] = 2
        g.grid[2, 0] = 3
        g.grid[3, :] = 4
        g.grid[4, 0] = 5
        self.assertEqual(2, g.clear_full_lines())
        self.assertEqual((5, 4), g.grid.shape)
        np.testing.assert_array_equal(np.array([
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [1, 0, 0, 0],
            [3, 0, 0, 0],
            [5, 0, 0, 0],
        ]), g.grid)

    def test_four_adjacent_rows(self):
        g = GameGrid(10, 20)
        g.grid[16:20, :] = 1
        g.grid[15, 2] = 6
        self.assertEqual(4, g.clear_full_lines())
        self.assertEqual((20, 10), g.grid.shape)
        self.assertEqual(6, g.grid[19, 2])
        self.assertEqual(1, int(np.count_nonzero(g.grid)))

    def test_every_row_full(self):
        g = GameGrid(3, 4)
        g.grid[:, :] = 1
        self.assertEqual(4, g.clear_full_lines())
        self.assertFalse(g.grid.any())


class TestHelpers(unittest.TestCase):
    def test_column_heights(self):
        g = GameGrid(3, 5)
        g.grid[4, 0] = 1
        g.grid[2, 2] = 1
        self.assertEqual([1, 0, 3], g.column_heights())

    def test_reset_and_clone(self):
        g = GameGrid(3, 3)
        g.grid[1, 1] = 1
        copy = g.clone_state()
        g.reset()
        self.assertEqual(1, copy[1, 1])
        self.assertFalse(g.grid.any())


if __name__ == '__main__':
    unittest.main()
