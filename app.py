from __future__ import annotations

import os
import random
import sys
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        HEIGHT,
        WIDTH,
        Action,
        Board,
        GameSession,
        make_player,
    )
except ImportError:
    from game import (  # type: ignore
        HEIGHT,
        WIDTH,
        Action,
        Board,
        GameSession,
        make_player,
    )

# Serve static assets from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

# One local game per process; the page in the browser drives both sides.
_session: Optional[GameSession] = None

_ACTIONS = {a.value: a for a in Action}


def _new_session(player1: str, player2: str, seed: Optional[int] = None) -> GameSession:
    rng = random.Random(seed) if seed is not None else None
    return GameSession(make_player(player1, rng=rng), make_player(player2, rng=rng))


def get_session() -> GameSession:
    global _session
    if _session is None:
        _session = _new_session("human", "minimax")
    return _session


def board_to_json(board: Board) -> Dict[str, Any]:
    cells = []
    for y in range(HEIGHT, 0, -1):
        row = []
        for x in range(1, WIDTH + 1):
            color = board.color_at(x, y)
            row.append(color.label if color else None)
        cells.append(row)
    return {"width": WIDTH, "height": HEIGHT, "serialized": board.serialize(), "cells": cells}


def _state_json(session: GameSession) -> Dict[str, Any]:
    return {"ok": True, "state": session.snapshot()}


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    global _session
    body = request.get_json(force=True, silent=True) or {}
    seed = body.get("seed", None)
    if seed is not None and not isinstance(seed, int):
        return jsonify({"ok": False, "error": "seed must be an integer"}), 400
    try:
        _session = _new_session(str(body.get("player1", "human")), str(body.get("player2", "minimax")), seed)
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify(_state_json(_session))


@app.get("/api/state")
def api_state() -> Any:
    return jsonify(_state_json(get_session()))


@app.post("/api/action")
def api_action() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    action = _ACTIONS.get(str(body.get("action", "")).lower())
    if action is None:
        return jsonify({"ok": False, "error": f"action must be one of {sorted(_ACTIONS)}"}), 400
    session = get_session()
    if session.current_player().is_bot:
        return jsonify({"ok": False, "error": "It is a bot's turn; call /api/bot"}), 400
    session.apply([action])
    return jsonify(_state_json(session))


@app.post("/api/bot")
def api_bot() -> Any:
    session = get_session()
    if not session.current_player().is_bot:
        return jsonify({"ok": False, "error": "It is a human's turn"}), 400
    actions = session.current_player().decide(session.board, session.cursor, session.current)
    session.apply(actions)
    out = _state_json(session)
    out["actions"] = [a.value for a in actions]
    return jsonify(out)


@app.post("/api/decode")
def api_decode() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    value = body.get("board")
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        return jsonify({"ok": False, "error": "board must be a non-negative integer"}), 400
    board = Board.deserialize(value)
    return jsonify({"ok": True, "board": board_to_json(board), "full": board.is_full()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=debug, threaded=False)
