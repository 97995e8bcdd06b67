"""Flask backend exposing maze generation and solving over JSON.

Endpoints:
  POST /generate -> { width?, height?, difficulty, start?, end?, seed? }
                    returns { grid, width, height, difficulty, start, end }
  POST /solve    -> { grid, start, end } returns { path: [{x, y}, ...] | null }
  POST /verify   -> { grid, start, end, path } returns the path evaluation
  GET  /health   -> { status: "ok" }
"""

from __future__ import annotations

import argparse
import os
from typing import List, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from .errors import MazeError
from .service import MazeService

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def create_app(service: Optional[MazeService] = None) -> Flask:
    app = Flask(__name__)
    CORS(app)
    maze_service = service or MazeService()

    @app.errorhandler(MazeError)
    def handle_maze_error(exc: MazeError):
        app.logger.debug("Rejected request: %s", exc)
        return jsonify({"error": exc.kind, "message": str(exc)}), 400

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.post("/generate")
    def generate():
        return jsonify(maze_service.generate(request.get_json(silent=True)))

    @app.post("/solve")
    def solve():
        return jsonify(maze_service.solve(request.get_json(silent=True)))

    @app.post("/verify")
    def verify():
        return jsonify(maze_service.verify(request.get_json(silent=True)))

    return app


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the maze generation and solving API")
    parser.add_argument("--host", type=str, default=os.environ.get("GRIDMAZE_HOST", DEFAULT_HOST))
    parser.add_argument("--port", type=int, default=int(os.environ.get("GRIDMAZE_PORT", DEFAULT_PORT)))
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
