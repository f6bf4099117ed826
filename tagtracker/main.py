#!/usr/bin/env python3
"""
Main entrypoint for the event API server.
"""
import argparse
import sys
from typing import List, Optional
from flask import Flask
from .config import HOST, PORT
from .events import Event, EventBus, EventCreatedContext
from .log import debug_log, log, set_debug
from .store import EventStore
from .web import create_app


def log_created_event(ctx: EventCreatedContext) -> None:
    """Report each ingested event on the console."""
    event = ctx.event
    log(f"Event #{event.id} {event.type} tag={event.tag_id} source={event.source}")


def build_app() -> Flask:
    """Wire a fresh store and bus into the Flask app."""
    store = EventStore()
    bus = EventBus()
    bus.subscribe(Event.EVENT_CREATED, log_created_event)
    return create_app(store, bus)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Smart Tag event API server")
    parser.add_argument("--debug", action="store_true", help="enable debug output")
    args = parser.parse_args(argv)

    set_debug(args.debug)
    app = build_app()

    log(f"API running at http://localhost:{PORT}")
    debug_log(f"Binding {HOST}:{PORT}")
    app.run(host=HOST, port=PORT, debug=False, use_reloader=False, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
