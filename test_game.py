import unittest

from game import (
    WIDTH,
    Board,
    Token,
    max_move,
)


def make_board(*moves):
    board = Board()
    for column, color in moves:
        assert board.place(column, color)
    return board


class TestConnect4Basics(unittest.TestCase):
    def test_empty_board_serializes_to_zero(self):
        board = Board()
        self.assertEqual(board.serialize(), 0)
        self.assertEqual(Board.deserialize(0), board)

    def test_round_trip_after_placements(self):
        board = make_board((4, Token.FIRST), (4, Token.SECOND), (3, Token.FIRST), (7, Token.SECOND))
        value = board.serialize()
        self.assertEqual(Board.deserialize(value), board)
        self.assertEqual(Board.deserialize(value).serialize(), value)

    def test_four_wins_three_does_not(self):
        board = make_board((1, Token.FIRST), (2, Token.FIRST), (3, Token.FIRST))
        self.assertFalse(board.has_win_at(3))
        board.place(4, Token.FIRST)
        self.assertTrue(board.has_win_at(4))

    def test_fullness(self):
        board = Board()
        for x in range(1, WIDTH + 1):
            for _ in range(6):
                self.assertFalse(board.is_full())
                board.place(x, Token.SECOND if x % 2 else Token.FIRST)
        self.assertTrue(board.is_full())


class TestMinimaxScenarios(unittest.TestCase):
    def test_completes_bottom_row(self):
        board = make_board((1, Token.FIRST), (2, Token.FIRST), (4, Token.FIRST))
        move = max_move(board.serialize(), Token.FIRST, Token.SECOND, 0)
        self.assertEqual(move.column, 3)
        self.assertEqual(move.confidence, 100)

    def test_blocks_vertical_threat(self):
        board = make_board(
            (4, Token.FIRST), (4, Token.FIRST), (4, Token.FIRST),
            (3, Token.SECOND), (7, Token.SECOND),
        )
        move = max_move(board.serialize(), Token.SECOND, Token.FIRST, 0)
        self.assertEqual(move.column, 4)


if __name__ == '__main__':
    unittest.main()
