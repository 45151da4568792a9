from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

WIDTH = 7
HEIGHT = 6
CELLS = WIDTH * HEIGHT
WIN_LENGTH = 4

Coord = Tuple[int, int]  # (x, y), 1-based, y == 1 is the bottom row


class OutOfRange(ValueError):
    """Raised when a column index falls outside [1, WIDTH]."""


class Token(Enum):
    FIRST = 1
    SECOND = 2

    def other(self) -> 'Token':
        return Token.SECOND if self is Token.FIRST else Token.FIRST

    @property
    def symbol(self) -> str:
        return 'Y' if self is Token.FIRST else 'R'

    @property
    def label(self) -> str:
        return 'yellow' if self is Token.FIRST else 'red'


class Direction(Enum):
    INCREASING = 1
    DECREASING = -1
    STABLE = 0


@dataclass(frozen=True)
class Direction2D:
    """One of the eight compass rays leaving a cell."""
    x: Direction
    y: Direction

    @classmethod
    def left(cls) -> 'Direction2D':
        return cls(Direction.DECREASING, Direction.STABLE)

    @classmethod
    def right(cls) -> 'Direction2D':
        return cls(Direction.INCREASING, Direction.STABLE)

    @classmethod
    def up(cls) -> 'Direction2D':
        return cls(Direction.STABLE, Direction.INCREASING)

    @classmethod
    def down(cls) -> 'Direction2D':
        return cls(Direction.STABLE, Direction.DECREASING)

    @classmethod
    def up_left(cls) -> 'Direction2D':
        return cls(Direction.DECREASING, Direction.INCREASING)

    @classmethod
    def up_right(cls) -> 'Direction2D':
        return cls(Direction.INCREASING, Direction.INCREASING)

    @classmethod
    def down_left(cls) -> 'Direction2D':
        return cls(Direction.DECREASING, Direction.DECREASING)

    @classmethod
    def down_right(cls) -> 'Direction2D':
        return cls(Direction.INCREASING, Direction.DECREASING)


# Opposite rays whose counts combine into one line through the origin.
AXIS_PAIRS: Tuple[Tuple[Direction2D, Direction2D], ...] = (
    (Direction2D.left(), Direction2D.right()),
    (Direction2D.up(), Direction2D.down()),
    (Direction2D.up_left(), Direction2D.down_right()),
    (Direction2D.up_right(), Direction2D.down_left()),
)


def _linear_step(coord: int, direction: Direction, bound: int) -> Optional[int]:
    nxt = coord + direction.value
    if 1 <= nxt <= bound:
        return nxt
    return None


def step(coord: Coord, direction: Direction2D) -> Optional[Coord]:
    """Moves one cell along a ray, or returns None when leaving the grid."""
    x = _linear_step(coord[0], direction.x, WIDTH)
    y = _linear_step(coord[1], direction.y, HEIGHT)
    if x is None or y is None:
        return None
    return x, y


def _check_column(column: int) -> None:
    if column < 1 or column > WIDTH:
        raise OutOfRange(f'column {column} outside 1..{WIDTH}')


class Board:
    """Sparse gravity grid: a coordinate is present iff a token occupies it."""

    def __init__(self, tokens: Optional[Dict[Coord, Token]] = None) -> None:
        self._tokens: Dict[Coord, Token] = dict(tokens) if tokens else {}

    def __len__(self) -> int:
        return len(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tokens == other._tokens

    def __repr__(self) -> str:
        return f'Board({self.to_string()!r})'

    def copy(self) -> 'Board':
        return Board(self._tokens)

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates, bottom row first, left to right."""
        for y in range(1, HEIGHT + 1):
            for x in range(1, WIDTH + 1):
                yield (x, y)

    # ----- placement and queries -----

    def place(self, column: int, color: Token) -> bool:
        """Drops a token into the lowest empty row of a column.

        Returns False when the column is already full; that is a normal outcome
        and leaves the board untouched. Raises OutOfRange for a bad column.
        """
        _check_column(column)
        for row in range(1, HEIGHT + 1):
            if (column, row) not in self._tokens:
                self._tokens[(column, row)] = color
                return True
        return False

    def color_at(self, x: int, y: int) -> Optional[Token]:
        return self._tokens.get((x, y))

    def column_height(self, column: int) -> int:
        _check_column(column)
        height = 0
        while (column, height + 1) in self._tokens:
            height += 1
        return height

    def valid_columns(self) -> List[int]:
        return [x for x in range(1, WIDTH + 1) if (x, HEIGHT) not in self._tokens]

    def is_full(self) -> bool:
        return len(self._tokens) == CELLS

    def reset(self) -> None:
        self._tokens.clear()

    # ----- win detection -----

    def has_win_at(self, column: int) -> bool:
        """True if the topmost token of the column sits on a run of WIN_LENGTH."""
        if column < 1 or column > WIDTH:
            return False
        for row in range(HEIGHT, 0, -1):
            if (column, row) in self._tokens:
                return self._has_win_at_cell((column, row))
        return False

    def _has_win_at_cell(self, origin: Coord) -> bool:
        color = self._tokens.get(origin)
        if color is None:
            return False
        for ray_a, ray_b in AXIS_PAIRS:
            # Both counts include the origin, so it is subtracted once.
            run = (self._count_in_direction(origin, ray_a, color)
                   + self._count_in_direction(origin, ray_b, color) - 1)
            if run >= WIN_LENGTH:
                return True
        return False

    def _count_in_direction(self, coord: Optional[Coord], direction: Direction2D, color: Token) -> int:
        if coord is None or self._tokens.get(coord) is not color:
            return 0
        return 1 + self._count_in_direction(step(coord, direction), direction, color)

    # ----- serialization -----

    def serialize(self) -> int:
        """Encodes the grid as a base-3 number, digit (y-1)*WIDTH + (x-1) per cell."""
        value = 0
        for (x, y), color in self._tokens.items():
            value += color.value * 3 ** ((y - 1) * WIDTH + (x - 1))
        return value

    @classmethod
    def deserialize(cls, value: int) -> 'Board':
        """Decodes a base-3 board number; digits other than 1 or 2 read as empty."""
        tokens: Dict[Coord, Token] = {}
        current = value
        for y in range(1, HEIGHT + 1):
            for x in range(1, WIDTH + 1):
                digit = current % 3
                if digit == Token.FIRST.value:
                    tokens[(x, y)] = Token.FIRST
                elif digit == Token.SECOND.value:
                    tokens[(x, y)] = Token.SECOND
                current //= 3
        return cls(tokens)

    # ----- text forms -----

    def to_string(self) -> str:
        """Column-major cell string (left column first, bottom cell first)."""
        chars: List[str] = []
        for x in range(1, WIDTH + 1):
            for y in range(1, HEIGHT + 1):
                color = self._tokens.get((x, y))
                chars.append(color.symbol if color else '_')
        return ''.join(chars)

    def pretty(self, cursor: Optional[int] = None) -> str:
        """Human-readable grid, top row first, with an optional cursor arrow row."""
        lines: List[str] = []
        if cursor is not None:
            lines.append(' ' + ' '.join('v' if x == cursor else ' ' for x in range(1, WIDTH + 1)))
        for y in range(HEIGHT, 0, -1):
            row: List[str] = []
            for x in range(1, WIDTH + 1):
                color = self._tokens.get((x, y))
                row.append(color.symbol if color else '.')
            lines.append('|' + '|'.join(row) + '|')
        lines.append(' ' + ' '.join(str(x) for x in range(1, WIDTH + 1)))
        return '\n'.join(lines)
