"""
Connect Four core Python package.

Game-state engine and bots, kept free of any rendering so the CLI, the Flask
front end and the tests share one implementation.
Modules:
- board.py: Board, Token, Direction2D, base-3 serialization, win detection
- search.py: fixed-depth minimax (BotMove, max_move, min_move, best_column)
- players.py: Action, Player and the human / random / minimax strategies
- session.py: GameSession turn orchestration and scores
- config.py: environment switches
- cli.py: terminal driver
"""
