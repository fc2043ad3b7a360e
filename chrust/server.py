"""Web frontend: static pages and a small JSON API over the engine."""

from __future__ import annotations

from pathlib import Path

from flask import Flask, Response, abort, current_app, jsonify, send_from_directory

from chrust.coordinate import Coordinate
from chrust.game import is_valid, process_fen, valid_moves
from chrust.settings import ProgramState

_STATIC_DIR = Path(__file__).resolve().parent / "static"
_PIECE_IMAGES = frozenset(
    f"{color}{kind}" for color in "bw" for kind in "BKNPQR"
)
_STATE_KEY = "PROGRAM_STATE"


def _coordinate_json(coordinate: Coordinate) -> dict[str, object]:
    return {"x": coordinate.x, "y": coordinate.y}


def _program_state() -> ProgramState:
    return current_app.config[_STATE_KEY]


def _static_file(subdir: str, name: str) -> Response:
    return send_from_directory(_STATIC_DIR / subdir, name)


def create_app(program_state: ProgramState) -> Flask:
    """Flask application serving the frontend for ``program_state``."""
    app = Flask(__name__, static_folder=None)
    app.config[_STATE_KEY] = program_state

    @app.get("/chrust/", strict_slashes=False)
    def index() -> Response:
        return _static_file("", "index.html")

    @app.get("/chrust/js/chrust.js")
    def javascript() -> Response:
        return _static_file("js", "chrust.js")

    @app.get("/chrust/css/chrust.css")
    def css() -> Response:
        return _static_file("css", "chrust.css")

    @app.get("/img/chesspieces/wikipedia/<piece>")
    def chesspiece(piece: str) -> Response:
        name = piece.replace(".png", "")
        if name not in _PIECE_IMAGES:
            abort(404)
        return send_from_directory(
            _STATIC_DIR / "img" / "chesspieces" / "wikipedia",
            f"{name}.png",
            mimetype="image/png",
        )

    @app.post("/chrust/api/process/<path:fen>")
    def process(fen: str) -> str:
        return process_fen(fen, _program_state().num_plies)

    @app.get("/chrust/api/possible/<path:fen>/<location>")
    def possible(fen: str, location: str) -> Response:
        try:
            options = valid_moves(fen, location)
        except ValueError:
            options = []
        return jsonify({"options": [_coordinate_json(c) for c in options]})

    @app.get("/chrust/api/validate/<path:current_fen>/<current_location>/<possible_location>")
    def validate(current_fen: str, current_location: str, possible_location: str) -> Response:
        try:
            valid = is_valid(current_fen, current_location, possible_location)
        except ValueError:
            valid = False
        return jsonify({"is_valid": valid})

    @app.get("/chrust/api/settings")
    def settings() -> Response:
        return jsonify({"program_state": _program_state().to_dict()})

    return app


def run_frontend(program_state: ProgramState) -> None:
    """Serve the frontend until interrupted."""
    create_app(program_state).run(host="127.0.0.1", port=8000)