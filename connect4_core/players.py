from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, List, Optional

from .board import Board, Token, WIDTH
from .config import search_depth
from .search import MAX_DEPTH, best_column


class Action(Enum):
    MOVE_LEFT = 'left'
    MOVE_RIGHT = 'right'
    DROP = 'drop'


def actions_toward(cursor: int, target: int) -> List[Action]:
    """Unit cursor moves from `cursor` to `target`, then a single drop."""
    step = Action.MOVE_RIGHT if target > cursor else Action.MOVE_LEFT
    actions = [step] * abs(target - cursor)
    actions.append(Action.DROP)
    return actions


class Player(ABC):
    """A source of cursor/drop actions for one side of the game."""

    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def decide(self, board: Board, cursor: int, color: Token) -> List[Action]:
        """Returns the queued actions for this turn; an empty list asks to quit."""
        pass

    @property
    def is_bot(self) -> bool:
        return True


KEY_ACTIONS: Dict[str, Action] = {
    'left': Action.MOVE_LEFT,
    'a': Action.MOVE_LEFT,
    'h': Action.MOVE_LEFT,
    'right': Action.MOVE_RIGHT,
    'd': Action.MOVE_RIGHT,
    'l': Action.MOVE_RIGHT,
    ' ': Action.DROP,
    'space': Action.DROP,
    'drop': Action.DROP,
    's': Action.DROP,
    'j': Action.DROP,
}
QUIT_KEYS = ('q', 'quit', 'esc', '\x1b')


class HumanPlayer(Player):
    """Maps one raw key from `read_key` to one action."""

    def __init__(self, read_key: Optional[Callable[[], Optional[str]]] = None) -> None:
        self._read_key = read_key

    def name(self) -> str:
        return 'Human'

    @property
    def is_bot(self) -> bool:
        return False

    def decide(self, board: Board, cursor: int, color: Token) -> List[Action]:
        if self._read_key is None:
            raise RuntimeError('HumanPlayer has no key source')
        while True:
            key = self._read_key()
            if key is None:
                return []
            # Keep a bare space; it is the drop key.
            norm = key.lower() if key.strip() == '' else key.strip().lower()
            if norm in QUIT_KEYS:
                return []
            action = KEY_ACTIONS.get(norm)
            if action is not None:
                return [action]


class RandomBot(Player):
    """Drops into a uniformly random column without looking at the board."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def name(self) -> str:
        return 'Random Bot'

    def decide(self, board: Board, cursor: int, color: Token) -> List[Action]:
        return actions_toward(cursor, self._rng.randint(1, WIDTH))


class MinimaxBot(Player):
    def __init__(self, rng: Optional[random.Random] = None, max_depth: int = MAX_DEPTH) -> None:
        self._rng = rng
        self.max_depth = max_depth

    def name(self) -> str:
        return 'Bot'

    def decide(self, board: Board, cursor: int, color: Token) -> List[Action]:
        move = best_column(board, color, rng=self._rng, max_depth=self.max_depth)
        if move.column == 0:
            # Nothing playable; dropping in place is a harmless no-op.
            return [Action.DROP]
        return actions_toward(cursor, move.column)


PLAYER_KINDS = ('human', 'random', 'minimax')


def make_player(
    kind: str,
    read_key: Optional[Callable[[], Optional[str]]] = None,
    rng: Optional[random.Random] = None,
) -> Player:
    """Builds a player by strategy name; unknown names are rejected."""
    if kind == 'human':
        return HumanPlayer(read_key)
    if kind == 'random':
        return RandomBot(rng)
    if kind == 'minimax':
        return MinimaxBot(rng, max_depth=search_depth(MAX_DEPTH))
    raise ValueError(f"unknown player kind {kind!r}; expected one of {', '.join(PLAYER_KINDS)}")
