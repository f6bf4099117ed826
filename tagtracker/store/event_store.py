"""Process-wide in-memory store for tag events."""
import datetime
import threading
from typing import Any, Callable, Dict, List, Optional, Set
from ..models import Stats, TagEvent

REQUIRED_FIELDS_MESSAGE = "tagId, source and type are required"
STRING_FIELDS_MESSAGE = "tagId, source and type must be strings"


class ValidationError(ValueError):
    """Raised when an event is missing a required field."""

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EventStore:
    """
    Ordered collection of events, newest first, with a sequential id counter.

    Events are never updated or removed; the store lives for the process
    lifetime. All access goes through one lock since Flask serves requests
    from multiple threads.
    """

    def __init__(self, clock: Optional[Callable[[], str]] = None) -> None:
        self._events: List[TagEvent] = []
        self._next_id = 1
        self._clock = clock or utc_timestamp
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    @staticmethod
    def _validate(tag_id: Any, source: Any, type_: Any) -> None:
        values = (tag_id, source, type_)
        # Missing and empty values share one message
        if any(v is None or v == "" for v in values):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)
        if not all(isinstance(v, str) for v in values):
            raise ValidationError(STRING_FIELDS_MESSAGE)

    def append(self, tag_id: Any, source: Any, type_: Any) -> TagEvent:
        """
        Create an event and insert it at the front of the store.

        Raises:
            ValidationError: if any field is missing, empty or not text.
                The store is left untouched.
        """
        self._validate(tag_id, source, type_)

        with self._lock:
            event = TagEvent(
                id=self._next_id,
                tag_id=tag_id,
                source=source,
                type=type_,
                created_at=self._clock(),
            )
            self._next_id += 1
            self._events.insert(0, event)
        return event

    def list(self) -> List[TagEvent]:
        """Return all events, most recent first."""
        with self._lock:
            return list(self._events)

    def compute_stats(self) -> Stats:
        """Aggregate counts over the current events in a single pass."""
        with self._lock:
            events = list(self._events)

        tags: Set[str] = set()
        by_type: Dict[str, int] = {}
        by_source: Dict[str, int] = {}

        for event in events:
            tags.add(event.tag_id)
            by_type[event.type] = by_type.get(event.type, 0) + 1
            by_source[event.source] = by_source.get(event.source, 0) + 1

        return Stats(
            total_events=len(events),
            unique_tags=len(tags),
            events_by_type=by_type,
            events_by_source=by_source,
        )
