"""
Core API routes for tag events.
"""
from flask import Flask, jsonify, request
from typing import Any, Dict
from ...events import Event, EventBus, EventCreatedContext
from ...log import debug_log
from ...store import EventStore, ValidationError


def register_routes(app: Flask, store: EventStore, bus: EventBus) -> None:
    """Register core API routes with Flask app."""

    @app.route("/api/events", methods=["POST"])
    def api_create_event() -> Any: # pyright: ignore[reportUnusedFunction]
        body = read_json_object()
        try:
            event = store.append(body.get("tagId"), body.get("source"), body.get("type"))
        except ValidationError as e:
            debug_log(f"Rejected event {body!r}: {e.message}")
            return jsonify({"message": e.message}), 400

        bus.emit(Event.EVENT_CREATED, EventCreatedContext(event))
        return jsonify(event.to_dict()), 201

    @app.route("/api/events", methods=["GET"])
    def api_events() -> Any: # pyright: ignore[reportUnusedFunction]
        return jsonify([e.to_dict() for e in store.list()])

    @app.route("/api/stats", methods=["GET"])
    def api_stats() -> Any: # pyright: ignore[reportUnusedFunction]
        return jsonify(store.compute_stats().to_dict())


def read_json_object() -> Dict[str, Any]:
    """Parse the request body, treating anything but a JSON object as empty."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return {}
    return body
