"""
Data models for the application.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class TagEvent:
    """A single simulated tag occurrence."""
    id: int
    tag_id: str
    source: str
    type: str
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the wire field names."""
        return {
            "id": self.id,
            "tagId": self.tag_id,
            "source": self.source,
            "type": self.type,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TagEvent":
        """
        Build an event from its wire form.

        Raises:
            ValueError: if the payload is not an event object.
        """
        try:
            return cls(
                id=int(data["id"]),
                tag_id=str(data["tagId"]),
                source=str(data["source"]),
                type=str(data["type"]),
                created_at=str(data["createdAt"]),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed event payload: {data!r}") from e


@dataclass
class Stats:
    """Aggregate counts derived from the store contents."""
    total_events: int = 0
    unique_tags: int = 0
    events_by_type: Dict[str, int] = field(default_factory=dict)
    events_by_source: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalEvents": self.total_events,
            "uniqueTags": self.unique_tags,
            "eventsByType": dict(self.events_by_type),
            "eventsBySource": dict(self.events_by_source),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Stats":
        """Raises ValueError if the payload is not a stats object."""
        try:
            return cls(
                total_events=int(data.get("totalEvents", 0)),
                unique_tags=int(data.get("uniqueTags", 0)),
                events_by_type=dict(data.get("eventsByType", {})),
                events_by_source=dict(data.get("eventsBySource", {})),
            )
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Malformed stats payload: {data!r}") from e
