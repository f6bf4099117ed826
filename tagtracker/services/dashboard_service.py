"""Service backing the dashboards: loads data and submits events."""
import requests
from typing import List, Optional, Tuple
from ..client import ApiClient, ApiError
from ..events import (
    Event, EventBus, EventCreatedContext, DataLoadedContext, LoadFailedContext
)
from ..log import log_error
from ..models import Stats, TagEvent

LOAD_FAILED_MESSAGE = "Could not load data from server."
SAVE_FAILED_MESSAGE = "Could not save event."


class DashboardError(Exception):
    """User-facing failure; the underlying cause is kept on __cause__."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DashboardService:
    """
    Loads events/stats and submits new events through the API client.

    Failures are logged with their cause and re-raised as DashboardError
    carrying a generic notice. Nothing is retried.
    """

    def __init__(self, client: ApiClient, bus: Optional[EventBus] = None) -> None:
        self.client = client
        self.bus = bus or EventBus()

    def load(self) -> Tuple[List[TagEvent], Stats]:
        """Fetch the event list and stats."""
        try:
            events = self.client.list_events()
            stats = self.client.get_stats()
        except (requests.RequestException, ApiError, ValueError, KeyError, TypeError) as e:
            log_error(f"Failed to load data from API: {e}")
            self.bus.emit(Event.LOAD_FAILED, LoadFailedContext(LOAD_FAILED_MESSAGE, e))
            raise DashboardError(LOAD_FAILED_MESSAGE) from e

        self.bus.emit(Event.DATA_LOADED, DataLoadedContext(events, stats))
        return events, stats

    def submit(self, tag_id: str, source: str, type_: str) -> TagEvent:
        """Create an event on the server."""
        try:
            event = self.client.create_event(tag_id, source, type_)
        except (requests.RequestException, ApiError, ValueError, KeyError, TypeError) as e:
            log_error(f"Failed to create event: {e}")
            raise DashboardError(SAVE_FAILED_MESSAGE) from e

        self.bus.emit(Event.EVENT_SUBMITTED, EventCreatedContext(event))
        return event
