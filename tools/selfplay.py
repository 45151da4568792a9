import argparse
import random
import sys
import time
from typing import Dict

sys.path.append('.')
import game  # type: ignore  # noqa: E402

BOT_KINDS = ('random', 'minimax')


def play_match(player1: str, player2: str, games: int, seed: int) -> Dict[str, int]:
    """Plays `games` finished games between two bots and tallies the results."""
    rng = random.Random(seed)
    session = game.GameSession(game.make_player(player1, rng=rng), game.make_player(player2, rng=rng))
    tally = {'yellow': 0, 'red': 0, 'draw': 0}
    while session.games_played < games:
        event = session.step()
        if event is None:
            break
        if event.kind == 'win':
            tally[event.winner.label] += 1
        elif event.kind == 'draw':
            tally['draw'] += 1
    return tally


def main():
    ap = argparse.ArgumentParser(description='Bot-vs-bot Connect Four matches')
    ap.add_argument('--player1', choices=BOT_KINDS, default='minimax')
    ap.add_argument('--player2', choices=BOT_KINDS, default='random')
    ap.add_argument('--games', type=int, default=10)
    ap.add_argument('--seed', type=int, default=0)
    args = ap.parse_args()

    t0 = time.time()
    tally = play_match(args.player1, args.player2, args.games, args.seed)
    took = time.time() - t0
    print(f"{args.player1} (yellow) vs {args.player2} (red), {args.games} games in {took:.1f}s")
    print(f"  yellow wins: {tally['yellow']}")
    print(f"  red wins:    {tally['red']}")
    print(f"  draws:       {tally['draw']}")


if __name__ == '__main__':
    main()
