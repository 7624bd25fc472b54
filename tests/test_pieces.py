import unittest

import numpy as np

from tetris_engine.game import Piece, PieceType


class PieceTests(unittest.TestCase):
    def test_spawn_centers_bounding_box(self):
        self.assertEqual(Piece.spawn(PieceType.O, 10).col, 4)
        self.assertEqual(Piece.spawn(PieceType.I, 10).col, 3)
        self.assertEqual(Piece.spawn(PieceType.T, 10).col, 3)
        self.assertEqual(Piece.spawn(PieceType.T, 10).row, 0)

    def test_moved_returns_new_value(self):
        piece = Piece.spawn(PieceType.S, 10)
        moved = piece.moved(-1, 2)
        self.assertEqual((moved.col, moved.row), (piece.col - 1, 2))
        self.assertEqual((piece.col, piece.row), (3, 0))
        self.assertIs(moved.shape, piece.shape)

    def test_rotated_does_not_mutate(self):
        piece = Piece.spawn(PieceType.L, 10)
        rotated = piece.rotated()
        self.assertEqual(rotated.shape, (3, 2))
        self.assertEqual(piece.shape.shape, (2, 3))
        turned = piece.with_shape(rotated)
        self.assertEqual(turned.kind, PieceType.L)
        self.assertEqual((turned.col, turned.row), (piece.col, piece.row))

    def test_equality_compares_cells(self):
        a = Piece.spawn(PieceType.Z, 10)
        b = Piece(PieceType.Z, np.array(a.shape), a.col, a.row)
        self.assertEqual(a, b)
        self.assertNotEqual(a, a.moved(1, 0))


if __name__ == "__main__":
    unittest.main()
