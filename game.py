from __future__ import annotations

# Facade module that re-exports the Connect Four core.
# Tests, tools and the Flask app import from here; the logic lives under connect4_core/*.

# Prefer the relative import when loaded as part of a package, then the top-level one.
try:
    from .connect4_core.board import (  # type: ignore
        WIDTH,
        HEIGHT,
        CELLS,
        WIN_LENGTH,
        AXIS_PAIRS,
        Board,
        Coord,
        Direction,
        Direction2D,
        OutOfRange,
        Token,
        step,
    )
    from .connect4_core.search import (  # type: ignore
        MAX_DEPTH,
        NO_MOVE,
        BotMove,
        best_column,
        max_move,
        min_move,
    )
    from .connect4_core.players import (  # type: ignore
        PLAYER_KINDS,
        Action,
        HumanPlayer,
        MinimaxBot,
        Player,
        RandomBot,
        actions_toward,
        make_player,
    )
    from .connect4_core.session import GameSession, MoveEvent  # type: ignore
except ImportError:
    from connect4_core.board import (  # type: ignore
        WIDTH,
        HEIGHT,
        CELLS,
        WIN_LENGTH,
        AXIS_PAIRS,
        Board,
        Coord,
        Direction,
        Direction2D,
        OutOfRange,
        Token,
        step,
    )
    from connect4_core.search import (  # type: ignore
        MAX_DEPTH,
        NO_MOVE,
        BotMove,
        best_column,
        max_move,
        min_move,
    )
    from connect4_core.players import (  # type: ignore
        PLAYER_KINDS,
        Action,
        HumanPlayer,
        MinimaxBot,
        Player,
        RandomBot,
        actions_toward,
        make_player,
    )
    from connect4_core.session import GameSession, MoveEvent  # type: ignore


def main() -> None:
    # CLI driver delegated to connect4_core.cli
    try:
        from .connect4_core.cli import main as _main  # type: ignore
    except ImportError:
        from connect4_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
