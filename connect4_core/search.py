from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from .board import Board, OutOfRange, Token, WIDTH
from .config import trace

MAX_DEPTH = 4

WIN_CONFIDENCE = 100
LOSS_CONFIDENCE = 0
DRAW_CONFIDENCE = 50
LEAF_BASE = 20
LEAF_JITTER = 19

# Process-wide source for the leaf jitter; no reproducibility guarantee.
_RNG = random.Random()


@dataclass(frozen=True, order=True)
class BotMove:
    """Candidate column with its confidence, ordered by confidence then column."""
    confidence: int
    column: int


NO_MOVE = BotMove(confidence=0, column=0)


@dataclass
class _Search:
    rng: random.Random
    max_depth: int
    nodes: int = 0

    def leaf(self) -> int:
        return LEAF_BASE + self.rng.randint(1, LEAF_JITTER)

    def drop(self, serialized: int, column: int, color: Token) -> Optional[Board]:
        """Decodes a fresh board and drops into it; None if the column is full."""
        board = Board.deserialize(serialized)
        self.nodes += 1
        try:
            placed = board.place(column, color)
        except OutOfRange as e:
            raise RuntimeError(f'search tried an invalid column: {e}') from e
        return board if placed else None

    def maximize(self, serialized: int, mover: Token, opponent: Token, depth: int) -> BotMove:
        moves: List[BotMove] = []
        for x in range(1, WIDTH + 1):
            board = self.drop(serialized, x, mover)
            if board is None:
                continue
            if board.has_win_at(x):
                return BotMove(WIN_CONFIDENCE, x)
            if board.is_full():
                moves.append(BotMove(DRAW_CONFIDENCE, x))
                continue
            if depth < self.max_depth:
                reply = self.minimize(board.serialize(), opponent, mover, depth + 1)
                if reply.confidence == WIN_CONFIDENCE:
                    return BotMove(WIN_CONFIDENCE, x)
                moves.append(BotMove(reply.confidence, x))
            else:
                moves.append(BotMove(self.leaf(), x))
        return max(moves) if moves else NO_MOVE

    def minimize(self, serialized: int, mover: Token, opponent: Token, depth: int) -> BotMove:
        moves: List[BotMove] = []
        for x in range(1, WIDTH + 1):
            board = self.drop(serialized, x, mover)
            if board is None:
                continue
            if board.has_win_at(x):
                return BotMove(LOSS_CONFIDENCE, x)
            if board.is_full():
                moves.append(BotMove(DRAW_CONFIDENCE, x))
                continue
            if depth < self.max_depth:
                reply = self.maximize(board.serialize(), opponent, mover, depth + 1)
                if reply.confidence == LOSS_CONFIDENCE:
                    return BotMove(LOSS_CONFIDENCE, x)
                moves.append(BotMove(reply.confidence, x))
            else:
                moves.append(BotMove(self.leaf(), x))
        return min(moves) if moves else NO_MOVE


def max_move(
    serialized: int,
    mover: Token,
    opponent: Token,
    depth: int = 0,
    rng: Optional[random.Random] = None,
    max_depth: int = MAX_DEPTH,
) -> BotMove:
    """Best column for the side to move, scored from that side's point of view."""
    return _Search(rng or _RNG, max_depth).maximize(serialized, mover, opponent, depth)


def min_move(
    serialized: int,
    mover: Token,
    opponent: Token,
    depth: int = 0,
    rng: Optional[random.Random] = None,
    max_depth: int = MAX_DEPTH,
) -> BotMove:
    """Reply that is worst for the opponent; 0 means the mover wins outright."""
    return _Search(rng or _RNG, max_depth).minimize(serialized, mover, opponent, depth)


def best_column(
    board: Board,
    color: Token,
    rng: Optional[random.Random] = None,
    max_depth: int = MAX_DEPTH,
) -> BotMove:
    """Runs the root maximizing search for `color` on the current board."""
    search = _Search(rng or _RNG, max_depth)
    move = search.maximize(board.serialize(), color, color.other(), 0)
    trace('search', f"{color.label}: column={move.column} confidence={move.confidence} "
                    f"boards={search.nodes} depth={max_depth}")
    return move
