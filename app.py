from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

from game import (
    DEFAULT_WIN_LENGTH,
    GameSession,
    InvalidCoordinate,
    WinCondition,
    board_view,
)

DEFAULT_SIZE = int(os.getenv("CONNECTK_DEFAULT_SIZE", "3"))
MAX_VIEW = int(os.getenv("CONNECTK_MAX_VIEW", "50"))

# Serve static assets from ./static next to this module (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- JSON helpers ----------

def _coord_to_json(coord) -> List[int]:
    return [int(coord[0]), int(coord[1])]


def win_condition_to_json(win: WinCondition) -> Dict[str, Any]:
    return {
        "symbol": win.symbol,
        "initiatedPoint": _coord_to_json(win.initiated_point),
        "firstSegment": [_coord_to_json(c) for c in win.first_segment],
        "secondSegment": [_coord_to_json(c) for c in win.second_segment],
    }


def state_to_json(session: GameSession) -> Dict[str, Any]:
    return {
        "size": int(session.board_size),
        "winLength": int(session.win_length),
        "moves": [_coord_to_json(m) for m in session.moves],
    }


def coord_from_json(value: Any) -> Tuple[int, int]:
    """Parses a [row, column] pair; floats, bools and strings are rejected rather than truncated."""
    row, column = value
    for v in (row, column):
        if not isinstance(v, int) or isinstance(v, bool):
            raise ValueError(f"coordinates must be integers, got {v!r}")
    return row, column


def json_to_session(obj: Dict[str, Any]) -> GameSession:
    """Rebuilds a session by replaying the accepted moves of a serialized state."""
    size = int(obj["size"])
    win_length = int(obj.get("winLength", DEFAULT_WIN_LENGTH))
    moves = [coord_from_json(m) for m in obj.get("moves", [])]
    return GameSession.replay(size, moves, win_length)


def _clip_view(value: Any, default: int) -> int:
    if value is None:
        return default
    return max(0, min(int(value), MAX_VIEW))


def _view_from_body(session: GameSession, body: Dict[str, Any]) -> Dict[str, Any]:
    default_span = min(session.board_size, MAX_VIEW)
    top = max(0, int(body.get("top", 0)))
    left = max(0, int(body.get("left", 0)))
    rows = _clip_view(body.get("rows"), default_span)
    cols = _clip_view(body.get("cols"), default_span)
    return {
        "top": top,
        "left": left,
        "cells": board_view(session.engine, top=top, left=left, rows=rows, cols=cols),
    }


def _game_payload(session: GameSession, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {
        "ok": True,
        "state": state_to_json(session),
        "view": _view_from_body(session, body or {}),
        "turn": session.current_symbol,
        "winner": session.winner,
        "ended": session.ended,
        "filled": session.engine.is_board_filled(),
        "winConditions": [win_condition_to_json(w) for w in session.engine.get_win_conditions()],
    }


# ---------- Core Game API (required by main.js) ----------

def _json_body() -> Optional[Dict[str, Any]]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return jsonify({"ok": False, "error": "JSON object required"}), 400
    try:
        size = int(body.get("size", DEFAULT_SIZE))
        win_length = int(body.get("winLength", DEFAULT_WIN_LENGTH))
        session = GameSession(size, win_length)
        payload = _game_payload(session, body)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad game settings: {e}"}), 400
    return jsonify(payload)


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return jsonify({"ok": False, "error": "JSON object required"}), 400
    s_in = body.get("state")
    if not s_in:
        return jsonify({"ok": False, "error": "state required"}), 400
    try:
        session = json_to_session(s_in)
        row, column = coord_from_json(body["move"])
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400
    try:
        outcome = session.play(row, column)
    except InvalidCoordinate as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    try:
        payload = _game_payload(session, body)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad view: {e}"}), 400
    payload["accepted"] = outcome.accepted
    payload["cue"] = outcome.cue
    return jsonify(payload)


@app.post("/api/view")
def api_view() -> Any:
    body = _json_body()
    if body is None:
        return jsonify({"ok": False, "error": "JSON object required"}), 400
    s_in = body.get("state")
    if not s_in:
        return jsonify({"ok": False, "error": "state required"}), 400
    try:
        session = json_to_session(s_in)
        view = _view_from_body(session, body)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad state: {e}"}), 400
    return jsonify({"ok": True, "view": view})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
