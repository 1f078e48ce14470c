"""Minimal Flask app answering liveness probes for the hosting platform."""
from __future__ import annotations

import logging

from flask import Flask

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "KCG deck bot is running"


def create_app() -> Flask:
    app = Flask(__name__)

    @app.get("/")
    def health():
        return HEALTH_MESSAGE, 200, {"Content-Type": "text/plain; charset=utf-8"}

    return app


def serve(port: int, host: str = "0.0.0.0") -> None:
    logger.info(f"Launching HTTP server on port: {port}, url: http://{host}:{port}")
    create_app().run(host=host, port=port)
