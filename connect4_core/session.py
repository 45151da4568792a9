from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .board import Board, HEIGHT, Token, WIDTH
from .config import trace
from .players import Action, Player


@dataclass(frozen=True)
class MoveEvent:
    """Outcome of applying one turn's actions.

    kind is one of 'moved' (cursor only), 'placed', 'full' (column full, turn kept),
    'win' or 'draw'. Boards are reset after 'win' and 'draw'.
    """
    kind: str
    color: Token
    column: int
    winner: Optional[Token] = None


class GameSession:
    """Turn orchestration around a Board: cursor, side to move and scores."""

    def __init__(self, player1: Player, player2: Player) -> None:
        self.board = Board()
        self.players = {Token.FIRST: player1, Token.SECOND: player2}
        self.cursor = 1
        self.current = Token.FIRST
        self.scores: Dict[Token, int] = {Token.FIRST: 0, Token.SECOND: 0}
        self.games_played = 0
        self.last_event: Optional[MoveEvent] = None

    def current_player(self) -> Player:
        return self.players[self.current]

    def move_left(self) -> None:
        if self.cursor > 1:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < WIDTH:
            self.cursor += 1

    def drop(self) -> MoveEvent:
        color = self.current
        column = self.cursor
        if not self.board.place(column, color):
            event = MoveEvent('full', color, column)
        elif self.board.has_win_at(column):
            self.scores[color] += 1
            event = MoveEvent('win', color, column, winner=color)
        elif self.board.is_full():
            event = MoveEvent('draw', color, column)
        else:
            event = MoveEvent('placed', color, column)

        if event.kind in ('win', 'draw'):
            trace('session', f"{event.kind} after {color.label} played column {column}; "
                             f"score {self.scores[Token.FIRST]}-{self.scores[Token.SECOND]}")
            self.board.reset()
            self.games_played += 1
        if event.kind != 'full':
            # The turn passes even after a win or a draw.
            self.current = color.other()
        self.last_event = event
        return event

    def apply(self, actions: Sequence[Action]) -> MoveEvent:
        """Processes actions in order; a drop, if any, must come last."""
        for i, action in enumerate(actions):
            if action is Action.MOVE_LEFT:
                self.move_left()
            elif action is Action.MOVE_RIGHT:
                self.move_right()
            elif action is Action.DROP:
                if i != len(actions) - 1:
                    raise ValueError('drop must be the final action of a turn')
                return self.drop()
            else:
                raise ValueError(f'unknown action {action!r}')
        event = MoveEvent('moved', self.current, self.cursor)
        self.last_event = event
        return event

    def step(self) -> Optional[MoveEvent]:
        """Lets the side to move decide and applies its actions; None means quit."""
        actions = self.current_player().decide(self.board, self.cursor, self.current)
        if not actions:
            return None
        return self.apply(actions)

    def snapshot(self) -> Dict[str, Any]:
        cells: List[List[Optional[str]]] = []
        for y in range(HEIGHT, 0, -1):
            row: List[Optional[str]] = []
            for x in range(1, WIDTH + 1):
                color = self.board.color_at(x, y)
                row.append(color.label if color else None)
            cells.append(row)
        event = self.last_event
        return {
            "board": self.board.serialize(),
            "cells": cells,
            "cursor": self.cursor,
            "current": self.current.label,
            "players": {t.label: self.players[t].name() for t in Token},
            "bots": {t.label: self.players[t].is_bot for t in Token},
            "scores": {t.label: self.scores[t] for t in Token},
            "gamesPlayed": self.games_played,
            "full": self.board.is_full(),
            "lastEvent": None if event is None else {
                "kind": event.kind,
                "color": event.color.label,
                "column": event.column,
                "winner": event.winner.label if event.winner else None,
            },
        }
