import unittest

import numpy as np

from tetris_engine.game import BASE_SHAPES, InvalidArgument, Piece, PieceKind


class PieceMovementTests(unittest.TestCase):
    def test_move_offsets(self):
        piece = Piece.spawn(PieceKind.T)
        piece.move("left")
        self.assertEqual(piece.origin, (-1, 0))
        piece.move("right")
        piece.move("right")
        self.assertEqual(piece.origin, (1, 0))
        piece.move("down")
        self.assertEqual(piece.origin, (1, 1))

    def test_move_rejects_unknown_direction(self):
        piece = Piece.spawn(PieceKind.T)
        with self.assertRaises(InvalidArgument):
            piece.move("up")
        self.assertEqual(piece.origin, (0, 0))

    def test_invalid_argument_is_value_error(self):
        with self.assertRaises(ValueError):
            Piece.spawn(PieceKind.O).move("sideways")


class PieceRotationTests(unittest.TestCase):
    def test_rotate_right_is_clockwise(self):
        piece = Piece.spawn(PieceKind.T)
        piece.rotate("right")
        np.testing.assert_array_equal(piece.cells, [[0, 1], [1, 1], [0, 1]])

    def test_rotate_left_is_counter_clockwise(self):
        piece = Piece.spawn(PieceKind.L)
        piece.rotate("left")
        np.testing.assert_array_equal(piece.cells, [[1, 0], [1, 0], [1, 1]])

    def test_default_rotation_is_right(self):
        a = Piece.spawn(PieceKind.S)
        b = Piece.spawn(PieceKind.S)
        a.rotate()
        b.rotate("right")
        np.testing.assert_array_equal(a.cells, b.cells)

    def test_four_rotations_restore_shape(self):
        for kind in PieceKind:
            for direction in ("right", "left"):
                piece = Piece.spawn(kind)
                for _ in range(4):
                    piece.rotate(direction)
                np.testing.assert_array_equal(piece.cells, BASE_SHAPES[kind], err_msg=f"{kind.name} {direction}")

    def test_o_piece_is_rotation_invariant(self):
        piece = Piece.spawn(PieceKind.O)
        piece.rotate("right")
        np.testing.assert_array_equal(piece.cells, BASE_SHAPES[PieceKind.O])
        piece.rotate("left")
        np.testing.assert_array_equal(piece.cells, BASE_SHAPES[PieceKind.O])

    def test_i_piece_alternates_between_two_matrices(self):
        piece = Piece.spawn(PieceKind.I)
        piece.rotate()
        self.assertEqual((piece.height, piece.width), (4, 1))
        piece.rotate()
        self.assertEqual((piece.height, piece.width), (1, 4))
        np.testing.assert_array_equal(piece.cells, BASE_SHAPES[PieceKind.I])

    def test_rotation_keeps_origin(self):
        piece = Piece(PieceKind.J, BASE_SHAPES[PieceKind.J], x=3, y=5)
        piece.rotate("left")
        self.assertEqual(piece.origin, (3, 5))

    def test_rotate_rejects_down(self):
        with self.assertRaises(InvalidArgument):
            Piece.spawn(PieceKind.T).rotate("down")


class PieceValueTests(unittest.TestCase):
    def test_spawn_does_not_alias_base_shape(self):
        piece = Piece.spawn(PieceKind.Z)
        piece.cells[0, 0] = 0
        self.assertEqual(BASE_SHAPES[PieceKind.Z][0, 0], 1)

    def test_copy_is_independent(self):
        piece = Piece.spawn(PieceKind.T)
        clone = piece.copy()
        clone.rotate()
        clone.move("down")
        np.testing.assert_array_equal(piece.cells, BASE_SHAPES[PieceKind.T])
        self.assertEqual(piece.origin, (0, 0))

    def test_cells_at_uses_origin(self):
        piece = Piece(PieceKind.S, BASE_SHAPES[PieceKind.S], x=2, y=3)
        self.assertEqual(piece.cells_at(), [(3, 3), (4, 3), (2, 4), (3, 4)])
        self.assertEqual(piece.cells_at(0, 0), [(1, 0), (2, 0), (0, 1), (1, 1)])

    def test_shape_view_is_read_only(self):
        piece = Piece.spawn(PieceKind.O)
        with self.assertRaises(ValueError):
            piece.shape()[0, 0] = 0

    def test_kind_accepts_name(self):
        self.assertIs(Piece.spawn("L").kind, PieceKind.L)
        with self.assertRaises(InvalidArgument):
            Piece.spawn("X")

    def test_rejects_empty_or_ragged_cells(self):
        with self.assertRaises(InvalidArgument):
            Piece(PieceKind.T, [])
        with self.assertRaises(InvalidArgument):
            Piece(PieceKind.T, [[1, 1], [1]])


if __name__ == "__main__":
    unittest.main()
