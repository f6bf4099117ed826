"""Application event bus."""
from enum import Enum
from typing import Callable, Any, Dict, List, Optional, Tuple, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import Stats, TagEvent


class Event(Enum):
    """Application-wide events."""
    EVENT_CREATED = "event_created"
    EVENT_SUBMITTED = "event_submitted"
    DATA_LOADED = "data_loaded"
    LOAD_FAILED = "load_failed"


class EventContext:
    """Base context for event handlers."""
    pass


class EventCreatedContext(EventContext):
    """Context passed to EVENT_CREATED and EVENT_SUBMITTED handlers."""
    def __init__(self, event: 'TagEvent') -> None:
        self.event = event


class DataLoadedContext(EventContext):
    """Context passed to DATA_LOADED handlers."""
    def __init__(self, events: List['TagEvent'], stats: 'Stats') -> None:
        self.events = events
        self.stats = stats


class LoadFailedContext(EventContext):
    """Context passed to LOAD_FAILED handlers."""
    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.cause = cause


ContextT = TypeVar('ContextT', bound=EventContext)


class EventBus:
    """Central event dispatcher."""

    def __init__(self) -> None:
        # Store handlers with Any type to allow different context subtypes
        self._handlers: Dict[Event, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        """Subscribe to an event with a typed handler."""
        if event not in self._handlers:
            self._handlers[event] = []
        self._handlers[event].append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        if event in self._handlers:
            try:
                self._handlers[event].remove(handler)  # type: ignore[arg-type]
            except ValueError:
                pass

    def emit(self, event: Event, context: EventContext) -> None:
        """Emit an event to all subscribers; a failing handler does not stop the rest."""
        for handler in self._handlers.get(event, []):
            try:
                handler(context)
            except Exception as e:
                print(f"Event handler error ({event.value}): {e}")

    def handlers(self, event: Event) -> Tuple[Callable[[Any], None], ...]:
        return tuple(self._handlers.get(event, []))
