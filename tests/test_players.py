import os
import unittest
from unittest.mock import patch

from game import (
    MAX_DEPTH,
    PLAYER_KINDS,
    WIDTH,
    Action,
    Board,
    HumanPlayer,
    MinimaxBot,
    RandomBot,
    Token,
    actions_toward,
    make_player,
)

L = Action.MOVE_LEFT
R = Action.MOVE_RIGHT
D = Action.DROP


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


def _keys(*keys):
    queue = list(keys)

    def read():
        return queue.pop(0) if queue else None
    return read


class TestActionSequences(unittest.TestCase):
    def test_given_cursor_and_target_then_unit_moves_then_single_drop(self):
        self.assertEqual(actions_toward(1, 4), [R, R, R, D])
        self.assertEqual(actions_toward(5, 2), [L, L, L, D])
        self.assertEqual(actions_toward(3, 3), [D])
        self.assertEqual(actions_toward(1, WIDTH), [R] * (WIDTH - 1) + [D])


class TestStrategies(unittest.TestCase):
    def test_given_random_bot_then_target_from_rng_and_board_ignored(self):
        bot = RandomBot(FixedRng(6))
        self.assertEqual(bot.name(), 'Random Bot')
        self.assertEqual(bot.decide(Board(), 2, Token.FIRST), [R, R, R, R, D])
        full = Board.deserialize(3 ** 42 - 1)
        self.assertEqual(bot.decide(full, 7, Token.SECOND), [L, D])

    def test_given_winning_column_when_minimax_decides_then_walks_there(self):
        board = Board()
        for column in (1, 2, 4):
            board.place(column, Token.SECOND)
        bot = MinimaxBot(FixedRng(3), max_depth=2)
        self.assertEqual(bot.name(), 'Bot')
        self.assertEqual(bot.decide(board, 5, Token.SECOND), [L, L, D])
        self.assertEqual(bot.decide(board, 1, Token.SECOND), [R, R, D])

    def test_given_full_board_when_minimax_decides_then_drops_in_place(self):
        full = Board.deserialize(3 ** 42 - 1)
        self.assertEqual(MinimaxBot(FixedRng(3)).decide(full, 4, Token.FIRST), [D])

    def test_given_keys_when_human_decides_then_one_action_per_key(self):
        human = HumanPlayer(_keys('x', 'LEFT'))
        self.assertEqual(human.name(), 'Human')
        self.assertFalse(human.is_bot)
        self.assertEqual(human.decide(Board(), 3, Token.FIRST), [L])
        self.assertEqual(HumanPlayer(_keys('d')).decide(Board(), 3, Token.FIRST), [R])
        self.assertEqual(HumanPlayer(_keys(' ')).decide(Board(), 3, Token.FIRST), [D])
        self.assertEqual(HumanPlayer(_keys('drop')).decide(Board(), 3, Token.FIRST), [D])

    def test_given_quit_or_end_of_input_when_human_decides_then_empty(self):
        self.assertEqual(HumanPlayer(_keys('q')).decide(Board(), 1, Token.FIRST), [])
        self.assertEqual(HumanPlayer(_keys('\x1b')).decide(Board(), 1, Token.FIRST), [])
        self.assertEqual(HumanPlayer(_keys()).decide(Board(), 1, Token.FIRST), [])

    def test_given_no_key_source_when_human_decides_then_raises(self):
        with self.assertRaises(RuntimeError):
            HumanPlayer().decide(Board(), 1, Token.FIRST)


class TestMakePlayer(unittest.TestCase):
    def test_given_known_kinds_then_matching_strategy(self):
        self.assertEqual(PLAYER_KINDS, ('human', 'random', 'minimax'))
        self.assertIsInstance(make_player('human'), HumanPlayer)
        self.assertIsInstance(make_player('random'), RandomBot)
        bot = make_player('minimax')
        self.assertIsInstance(bot, MinimaxBot)
        self.assertEqual(bot.max_depth, MAX_DEPTH)

    def test_given_unknown_kind_then_rejected(self):
        for kind in ('', 'Minimax', 'alphabeta'):
            with self.assertRaises(ValueError):
                make_player(kind)

    def test_given_depth_env_when_making_minimax_then_override_applies(self):
        with patch.dict(os.environ, {'CONNECT4_SEARCH_DEPTH': '2'}):
            self.assertEqual(make_player('minimax').max_depth, 2)
        with patch.dict(os.environ, {'CONNECT4_SEARCH_DEPTH': 'deep'}):
            self.assertEqual(make_player('minimax').max_depth, MAX_DEPTH)
        with patch.dict(os.environ, {'CONNECT4_SEARCH_DEPTH': '-1'}):
            self.assertEqual(make_player('minimax').max_depth, MAX_DEPTH)


if __name__ == '__main__':
    unittest.main(verbosity=2)
