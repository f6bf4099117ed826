"""In-memory event storage."""
from .event_store import EventStore, ValidationError, utc_timestamp

__all__ = ['EventStore', 'ValidationError', 'utc_timestamp']
