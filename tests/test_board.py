import unittest

from tetris_board import Board
from tetris_piece import Piece


class BoardValidityTests(unittest.TestCase):
    def setUp(self):
        self.board = Board(10, 20)

    def test_empty_board_dimensions(self):
        self.assertEqual(len(self.board.grid), 20)
        self.assertTrue(all(len(r) == 10 and not any(r) for r in self.board.grid))

    def test_horizontal_bounds(self):
        i = Piece.create(1, 0, 0)
        self.assertTrue(self.board.is_valid(i))
        i.x = -1
        self.assertFalse(self.board.is_valid(i))
        i.x = 6
        self.assertTrue(self.board.is_valid(i))
        i.x = 7
        self.assertFalse(self.board.is_valid(i))

    def test_empty_matrix_cells_may_hang_outside(self):
        # vertical I occupies only column 2 of its matrix
        i = Piece.create(1)
        i.rotate_cw()
        i.x = -2
        self.assertTrue(self.board.is_valid(i))

    def test_floor(self):
        o = Piece.create(4, 0, 18)
        self.assertTrue(self.board.is_valid(o))
        o.y = 19
        self.assertFalse(self.board.is_valid(o))

    def test_cells_above_top_ignore_grid(self):
        self.board.grid[0][0] = 3
        o = Piece.create(4, 0, -2)
        self.assertTrue(self.board.is_valid(o))
        o.y = -1
        self.assertFalse(self.board.is_valid(o))
        o.x = -1
        o.y = -5
        self.assertFalse(self.board.is_valid(o))

    def test_overlap_with_locked_cell(self):
        self.board.grid[10][5] = 2
        t = Piece.create(6, 4, 9)
        self.assertFalse(self.board.is_valid(t))
        t.x = 6
        self.assertTrue(self.board.is_valid(t))


class BoardMergeClearTests(unittest.TestCase):
    def setUp(self):
        self.board = Board(10, 20)

    def test_merge_writes_type_id(self):
        self.board.merge(Piece.create(6, 0, 18))
        self.assertEqual(self.board.grid[18][:3], [0,6,0])
        self.assertEqual(self.board.grid[19][:3], [6,6,6])

    def test_merge_skips_rows_above_board(self):
        self.board.merge(Piece.create(4, 0, -1))
        self.assertEqual(self.board.grid[0][:2], [4,4])
        self.assertEqual(sum(v != 0 for r in self.board.grid for v in r), 2)

    def test_clear_lines_without_full_rows(self):
        self.board.grid[19][0] = 1
        before = [r[:] for r in self.board.grid]
        self.assertEqual(self.board.clear_lines(), 0)
        self.assertEqual(self.board.grid, before)
        self.assertEqual(self.board.clear_lines(), 0)

    def test_bottom_row_clear_shifts_rows_down(self):
        b = self.board
        b.merge(Piece.create(1, 0, 18))   # cols 0-3 of row 19
        b.merge(Piece.create(1, 4, 18))   # cols 4-7
        b.merge(Piece.create(4, 8, 18))   # cols 8-9 of rows 18 and 19
        self.assertTrue(all(b.grid[19]))
        row18 = b.grid[18][:]
        self.assertEqual(b.clear_lines(), 1)
        self.assertEqual(len(b.grid), 20)
        self.assertEqual(b.grid[19], row18)
        self.assertEqual(b.grid[0], [0]*10)

    def test_clear_keeps_order_of_remaining_rows(self):
        b = self.board
        b.grid[19] = [7]*10
        b.grid[18] = [1] + [0]*9
        b.grid[17] = [7]*10
        b.grid[16] = [0]*9 + [2]
        self.assertEqual(b.clear_lines(), 2)
        self.assertEqual(len(b.grid), 20)
        self.assertEqual(b.grid[19], [1] + [0]*9)
        self.assertEqual(b.grid[18], [0]*9 + [2])
        self.assertEqual(b.grid[:18], [[0]*10 for _ in range(18)])

    def test_clear_whole_board(self):
        self.board.grid = [[5]*10 for _ in range(20)]
        self.assertEqual(self.board.clear_lines(), 20)
        self.assertEqual(self.board.grid, self.board.empty_grid())

    def test_reset(self):
        self.board.grid[3][3] = 1
        self.board.piece = Piece.create(1)
        self.board.reset()
        self.assertEqual(self.board.grid, self.board.empty_grid())
        self.assertIsNone(self.board.piece)


class BoardSlotTests(unittest.TestCase):
    def test_take_next_moves_pieces_between_slots(self):
        b = Board()
        first, second = Piece.create(1), Piece.create(2)
        b.next_piece = first
        self.assertIs(b.take_next(second), first)
        self.assertIs(b.piece, first)
        self.assertIs(b.next_piece, second)

    def test_take_next_refuses_aliasing(self):
        b = Board()
        p = Piece.create(3)
        b.piece = p
        with self.assertRaises(RuntimeError):
            b.take_next(p)

    def test_swap_hold(self):
        b = Board()
        a = Piece.create(5)
        b.piece = a
        self.assertIsNone(b.swap_hold())
        self.assertIs(b.hold_piece, a)
        self.assertIsNone(b.piece)


if __name__ == "__main__":
    unittest.main()
