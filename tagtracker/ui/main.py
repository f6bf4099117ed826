#!/usr/bin/env python3
"""
Main entrypoint for the desktop dashboard.
"""
import argparse
import sys
from typing import List, Optional
from PyQt5.QtWidgets import QApplication
from ..client import ApiClient
from ..config import Config
from ..events import Event, EventBus, DataLoadedContext
from ..log import debug_log, set_debug
from ..services.dashboard_service import DashboardService
from .dashboard import DashboardWindow


def _log_loaded(ctx: DataLoadedContext) -> None:
    debug_log(f"Loaded {len(ctx.events)} events, {ctx.stats.unique_tags} unique tags")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Smart Tag desktop dashboard")
    parser.add_argument("--config", default=None, help="settings JSON file")
    parser.add_argument("--debug", action="store_true", help="enable debug output")
    args, qt_args = parser.parse_known_args(argv)

    set_debug(args.debug)
    settings = Config(args.config) if args.config else Config()

    bus = EventBus()
    bus.subscribe(Event.DATA_LOADED, _log_loaded)
    service = DashboardService(ApiClient(settings.api_base), bus)

    # Initialize the global QApplication instance before any widget
    app = QApplication([sys.argv[0]] + qt_args)
    window = DashboardWindow(service, settings)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
