"""Flask application factory for the usage export.

The ``create_app`` function wraps a registry and returns a Flask app
with three endpoints:

- ``GET /`` — render ``format_usage`` as plain text.
- ``GET /api/usage`` — return every binding as JSON, in name order.
- ``GET /api/log`` — return the registry's audit log entries.

The app never parses or registers anything; it only reads.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify

from py_getenv.registry import Registry
from py_getenv.usage import format_usage


def create_app(registry: Registry) -> Flask:
    """Create and configure the Flask application.

    Args:
        registry: The registry whose usage data is served.

    Returns:
        A configured Flask application ready to serve.

    """
    app = Flask(__name__)

    @app.route("/")
    def index() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Render plain-text usage."""
        return Response(format_usage(registry), mimetype="text/plain")

    @app.route("/api/usage")
    def api_usage() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return usage metadata as JSON."""
        variables: list[dict[str, Any]] = [
            {
                "name": b.name,
                "kind": str(b.kind),
                "description": b.description,
                "default": b.default,
                "required": b.required,
            }
            for b in registry.bindings()
        ]
        return jsonify({"variables": variables})

    @app.route("/api/log")
    def api_log() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the audit log as JSON."""
        return jsonify({"entries": [str(e) for e in registry.logger.entries]})

    return app
