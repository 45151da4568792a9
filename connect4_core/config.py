from __future__ import annotations

import os
from typing import Optional

_TRUTHY = ('1', 'true', 'yes', 'on')


def _flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def debug_enabled() -> bool:
    """Set CONNECT4_DEBUG=1 to print search and session traces."""
    return _flag('CONNECT4_DEBUG')


def trace(tag: str, message: str) -> None:
    if debug_enabled():
        print(f"[{tag}] {message}")


def search_depth(default: int) -> int:
    """Bot search depth, overridable through CONNECT4_SEARCH_DEPTH."""
    raw: Optional[str] = os.getenv('CONNECT4_SEARCH_DEPTH')
    if not raw:
        return default
    try:
        depth = int(raw)
    except ValueError:
        trace('config', f"CONNECT4_SEARCH_DEPTH={raw!r} is not an integer; using {default}")
        return default
    if depth < 0:
        trace('config', f"CONNECT4_SEARCH_DEPTH={depth} is negative; using {default}")
        return default
    return depth


def bot_delay() -> float:
    """Seconds the CLI waits after a bot move so humans can follow along."""
    raw = os.getenv('CONNECT4_BOT_DELAY', '0')
    try:
        return max(0.0, float(raw))
    except ValueError:
        trace('config', f"CONNECT4_BOT_DELAY={raw!r} is not a number; using 0")
        return 0.0
