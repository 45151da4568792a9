from __future__ import annotations

import argparse
import random
import time
from typing import List, Optional

from .board import Token
from .config import bot_delay
from .players import PLAYER_KINDS, make_player
from .session import GameSession

HELP = "Keys: a/left, d/right, space/drop (or s), q to quit. One key per line."


def read_key_line() -> Optional[str]:
    """Reads one key word from stdin; None at end of input."""
    try:
        line = input('> ')
    except EOFError:
        return None
    # An empty line counts as the space key.
    return line if line.strip() else ' '


def render(session: GameSession) -> str:
    lines: List[str] = []
    for token in Token:
        marker = '->' if token is session.current else '  '
        player = session.players[token]
        lines.append(f"{marker} Player {token.value}: {session.scores[token]:02d} "
                     f"[{token.symbol}] ({player.name()})")
    lines.append('')
    lines.append(session.board.pretty(cursor=session.cursor))
    return '\n'.join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four with a minimax bot')
    parser.add_argument('-1', '--player1', choices=PLAYER_KINDS, default='human',
                        help='Strategy for player 1 (yellow, moves first)')
    parser.add_argument('-2', '--player2', choices=PLAYER_KINDS, default='human',
                        help='Strategy for player 2 (red)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the bots')
    parser.add_argument('--games', type=int, default=None,
                        help='Stop after this many finished games (default: until quit)')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(
        make_player(args.player1, read_key=read_key_line, rng=rng),
        make_player(args.player2, read_key=read_key_line, rng=rng),
    )
    delay = bot_delay()
    print('Connect Four')
    if not (session.players[Token.FIRST].is_bot and session.players[Token.SECOND].is_bot):
        print(HELP)

    while args.games is None or session.games_played < args.games:
        print()
        print(render(session))
        mover = session.current
        event = session.step()
        if event is None:
            print('Bye.')
            break
        if event.kind == 'full':
            print(f"Column {event.column} is full.")
        elif event.kind == 'win':
            print(f"Player {mover.value} ({mover.label}) wins! Score "
                  f"{session.scores[Token.FIRST]}-{session.scores[Token.SECOND]}")
        elif event.kind == 'draw':
            print('Draw!')
        if session.players[mover].is_bot and event.kind != 'moved' and delay:
            time.sleep(delay)


if __name__ == '__main__':
    main()
