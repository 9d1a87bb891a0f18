"""
Mortal Coil — Flask web server.

Exposes the game engine as a small JSON API and pushes every state change
to connected browsers as Server-Sent Events.

Encapsulation: this module only calls the public ``GamePlay`` operations
and the ``Broadcaster``.  It never touches the board directly.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Iterator

from flask import Flask, Response, jsonify, request

from backend.engine.broadcast import Broadcaster, Listener
from backend.engine.gameplay import ErrorKind, GamePlay

logger = logging.getLogger(__name__)

HEARTBEAT_SECONDS = 15.0


def _parse_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _json_object() -> dict[str, Any]:
    """Request body as a dict; anything but a JSON object counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def event_stream(
    broadcaster: Broadcaster,
    listener: Listener,
    heartbeat: float = HEARTBEAT_SECONDS,
) -> Iterator[str]:
    """Yield SSE frames for *listener* until the client goes away."""
    try:
        while True:
            message = listener.get(timeout=heartbeat)
            if message is None:
                yield ": keep-alive\n\n"
                continue
            yield f"data: {json.dumps(message)}\n\n"
    finally:
        broadcaster.disconnect(listener)


def create_app(engine: GamePlay, broadcaster: Broadcaster | None = None) -> Flask:
    """Build the Flask app around an existing engine."""
    app = Flask(__name__)

    if broadcaster is None:
        broadcaster = Broadcaster(engine.snapshot)
    engine.subscribe(broadcaster)

    # Flask's dev server is threaded; mutating calls must not interleave.
    lock = threading.Lock()

    app.extensions["mortal_coil"] = {
        "engine": engine,
        "broadcaster": broadcaster,
        "lock": lock,
    }

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    @app.route("/api/state", methods=["GET"])
    def get_state():
        with lock:
            return jsonify(engine.snapshot())

    @app.route("/api/levels", methods=["GET"])
    def get_levels():
        return jsonify(engine.list_levels())

    # -----------------------------------------------------------------------
    # Mutations
    # -----------------------------------------------------------------------

    @app.route("/api/level/<level_id>", methods=["POST"])
    def load_level(level_id):
        parsed = _parse_int(level_id)
        if parsed is None:
            return jsonify(success=False, message="Level not found"), 404
        with lock:
            result = engine.load_level(parsed)
        if result.error is ErrorKind.NOT_FOUND:
            return jsonify(result.to_dict()), 404
        return jsonify(result.to_dict())

    @app.route("/api/start", methods=["POST"])
    def start_game():
        data = _json_object()
        if data.get("x") is None or data.get("y") is None:
            return jsonify(success=False,
                           message="x and y coordinates required"), 400
        x, y = _parse_int(data["x"]), _parse_int(data["y"])
        if x is None or y is None:
            return jsonify(success=False,
                           message="x and y must be integers"), 400
        with lock:
            result = engine.start_game(x, y)
        return jsonify(result.to_dict())

    @app.route("/api/move", methods=["POST"])
    def move():
        data = _json_object()
        direction = data.get("direction")
        if not direction:
            return jsonify(success=False,
                           message="direction required (up, down, left, right)"), 400
        with lock:
            result = engine.move(str(direction))
        return jsonify(result.to_dict())

    @app.route("/api/reset", methods=["POST"])
    def reset():
        with lock:
            result = engine.reset_level()
        if result.error is ErrorKind.NOT_FOUND:
            return jsonify(result.to_dict()), 404
        return jsonify(result.to_dict())

    # -----------------------------------------------------------------------
    # Live updates
    # -----------------------------------------------------------------------

    @app.route("/api/events", methods=["GET"])
    def events():
        with lock:
            listener = broadcaster.connect()
        return Response(
            event_stream(broadcaster, listener),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache"},
        )

    return app
