import unittest
from unittest import mock

from chipdrop.core.board import Board
from chipdrop.ui import render


class TestRender(unittest.TestCase):
    def test_given_chips_when_drawing_without_color_then_bottom_row_last(self):
        board = Board()
        board.place_chip(0, 1)
        board.place_chip(0, 2)
        with mock.patch.object(render, "USE_COLOR", False):
            lines = render.board_lines(board)

        self.assertEqual(lines[0], "   1 2 3 4 5 6 7")
        # header, six rows, footer
        self.assertEqual(len(lines), 8)
        self.assertTrue(lines[6].startswith(" | ●"))
        self.assertTrue(lines[5].startswith(" | ●"))
        self.assertTrue(lines[4].startswith(" | ·"))

    def test_given_winning_line_when_drawing_then_cells_reversed(self):
        board = Board()
        for col in range(4):
            board.place_chip(col, 1)
        with mock.patch.object(render, "USE_COLOR", False):
            lines = render.board_lines(board, highlight=[(0, 0), (1, 0), (2, 0), (3, 0)])
        self.assertEqual(lines[6].count(render.REVERSE), 4)
        self.assertNotIn(render.REVERSE, lines[5])


if __name__ == "__main__":
    unittest.main()
