import unittest

import numpy as np

from tetris_engine.game import PIECE_TYPES, PieceType, rotate_cw, shape_for


class ShapeCatalogTests(unittest.TestCase):
    def test_filled_cells_carry_type_id(self):
        for kind in PIECE_TYPES:
            shape = shape_for(kind)
            values = set(np.unique(shape)) - {0}
            self.assertEqual(values, {int(kind)})
            self.assertEqual(int(np.count_nonzero(shape)), 4)

    def test_o_piece_is_type_four(self):
        self.assertEqual(PieceType.O, 4)
        np.testing.assert_array_equal(shape_for(4), [[4, 4], [4, 4]])

    def test_empty_placeholder(self):
        self.assertEqual(shape_for(0).size, 0)

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValueError):
            shape_for(8)

    def test_catalog_is_read_only(self):
        with self.assertRaises(ValueError):
            shape_for(PieceType.T)[0, 0] = 9


class RotationTests(unittest.TestCase):
    def test_clockwise_matches_index_formula(self):
        src = shape_for(PieceType.J)
        out = rotate_cw(src)
        rows, cols = src.shape
        self.assertEqual(out.shape, (cols, rows))
        for r in range(rows):
            for c in range(cols):
                self.assertEqual(out[c, rows - 1 - r], src[r, c])
        np.testing.assert_array_equal(out, [[2, 2], [2, 0], [2, 0]])

    def test_four_rotations_are_identity(self):
        for kind in PIECE_TYPES:
            shape = shape_for(kind)
            turned = shape
            for _ in range(4):
                turned = rotate_cw(turned)
            np.testing.assert_array_equal(turned, shape)

    def test_i_piece_turns_vertical(self):
        self.assertEqual(rotate_cw(shape_for(PieceType.I)).shape, (4, 1))


if __name__ == "__main__":
    unittest.main()
