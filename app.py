from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    AutomatedPlayer,
    Board,
    Game,
    HumanPlayer,
    QueuedInput,
    RecordingNotifier,
    TurnInfo,
    nim_sum as g_nim_sum,
    winning_moves as g_winning_moves,
)
from matchsticks_core.config import env_flag, max_stacks

app = Flask(__name__)


def state_to_json(board: Board, turn: int) -> Dict[str, Any]:
    return {"stacks": list(board.stacks), "turn": int(turn)}


def _as_int(value: Any, what: str) -> int:
    # bool is an int subclass; floats would be silently truncated by int().
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def _json_to_state(obj: Dict[str, Any]) -> Tuple[Board, int]:
    stacks = obj["stacks"]
    if not isinstance(stacks, list):
        raise ValueError("stacks must be a list")
    if len(stacks) > max_stacks():
        raise ValueError(f"at most {max_stacks()} stacks are supported")
    turn = _as_int(obj.get("turn", 0), "turn")
    if turn not in (0, 1):
        raise ValueError("turn must be 0 or 1")
    return Board.from_stacks(_as_int(x, "stack count") for x in stacks), turn


def _move_to_json(move: Optional[TurnInfo]) -> Optional[List[int]]:
    # Stacks are 1-based on the wire, matching what players type.
    if move is None:
        return None
    return [int(move.stack) + 1, int(move.count)]


def _bad_state(e: Exception) -> Any:
    return jsonify({"ok": False, "error": f"bad state: {e}"}), 400


def _json_body() -> Optional[Dict[str, Any]]:
    """The request JSON as a dict; an empty or unparsable body counts as {}, any other JSON value as None."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _bad_body() -> Any:
    return jsonify({"ok": False, "error": "request body must be a JSON object"}), 400


def _load_state(body: Dict[str, Any]) -> Tuple[Board, int]:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return _json_to_state(s_in)


def _game_result(game: Game, notifier: RecordingNotifier) -> Dict[str, Any]:
    turn = game.current_player if game.current_player is not None else game.winner
    return {
        "ok": True,
        "move": _move_to_json(game.last_move),
        "state": state_to_json(game.board, turn),
        "finished": game.finished,
        "winner": game.winner,
        "messages": list(notifier.messages),
    }


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    try:
        n = _as_int(body.get("stacks", 4), "stacks")
    except ValueError:
        return jsonify({"ok": False, "error": "stacks must be an integer"}), 400
    if n < 1 or n > max_stacks():
        return jsonify({"ok": False, "error": f"stacks must be between 1 and {max_stacks()}"}), 400
    board = Board.new(n)
    return jsonify({
        "ok": True,
        "state": state_to_json(board, 0),
        "finished": False,
        "winner": None,
        "nimSum": g_nim_sum(board),
    })


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    try:
        board, turn = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    move = body.get("move")
    if not isinstance(move, list) or len(move) != 2:
        return jsonify({"ok": False, "error": "move must be [stack, count]"}), 400
    if not board.exists_match():
        return jsonify({"ok": False, "error": "The game is already finished"}), 400

    notifier = RecordingNotifier()
    human = HumanPlayer(input=QueuedInput(str(v) for v in move))
    game = Game(board, (human, human), notifier=notifier, first_player=turn)
    game.step()
    if game.last_error is not None:
        return jsonify({
            "ok": False,
            "error": game.last_error.message,
            "kind": game.last_error.kind,
            "state": state_to_json(board, turn),
        }), 400
    return jsonify(_game_result(game, notifier))


@app.post("/api/ai")
def api_ai() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    try:
        board, turn = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    if not board.exists_match():
        return jsonify({"ok": False, "error": "The game is already finished"}), 400
    seed = body.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"ok": False, "error": "seed must be an integer"}), 400
    rng = random.Random(seed) if seed is not None else random.Random()

    notifier = RecordingNotifier()
    ai = AutomatedPlayer(rng=rng)
    game = Game(board, (ai, ai), notifier=notifier, first_player=turn)
    game.step()
    return jsonify(_game_result(game, notifier))


@app.post("/api/analyze")
def api_analyze() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    try:
        board, _turn = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_state(e)
    total = g_nim_sum(board)
    return jsonify({
        "ok": True,
        "nimSum": total,
        "winning": total != 0,
        "winningMoves": [_move_to_json(m) for m in g_winning_moves(board)],
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
