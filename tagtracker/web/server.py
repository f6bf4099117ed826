"""
Flask server for the event API and browser dashboard.
"""
from flask import Flask, Response
from typing import Optional
import os
from ..events import EventBus
from ..store import EventStore


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(store: EventStore, bus: Optional[EventBus] = None) -> Flask:
    """
    Create Flask app serving the event API.

    Args:
        store: Event store shared by all request handlers
        bus: Event bus notified about ingested events
    """
    app = Flask(__name__,
                static_folder="static",
                static_url_path="/static")
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.config["EVENT_STORE"] = store
    app.config["EVENT_BUS"] = bus or EventBus()

    # Register core routes (data APIs)
    from .routes import core_routes
    core_routes.register_routes(app, store, app.config["EVENT_BUS"])

    @app.after_request
    def add_cors_headers(response: Response) -> Response: # pyright: ignore[reportUnusedFunction]
        """Allow cross-origin requests from any origin."""
        for header, value in CORS_HEADERS.items():
            response.headers[header] = value
        return response

    @app.route("/")
    def index() -> Response: # pyright: ignore[reportUnusedFunction]
        """Serve the browser dashboard."""
        return Response(load_template(), mimetype='text/html')

    return app


def load_static_file(filename: str) -> str:
    """Load a file from the static directory."""
    file_path = os.path.join(os.path.dirname(__file__), "static", filename)
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def load_template() -> str:
    """Load the main dashboard HTML template."""
    return load_static_file("dashboard.html")
