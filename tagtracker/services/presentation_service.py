"""Derived values for rendering events and stats."""
import datetime
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple
from ..config import TREND_WINDOW
from ..models import TagEvent

# Sparkline weight per event type; unknown types use DEFAULT_WEIGHT
TYPE_WEIGHTS: Dict[str, float] = {"alert": 0.9, "status": 0.6}
DEFAULT_WEIGHT = 0.4

# Sparkline drawing box
TREND_WIDTH = 100.0
TREND_BASELINE = 35.0
TREND_AMPLITUDE = 20.0


@dataclass
class BarRow:
    """One row of a bar chart."""
    label: str
    count: int
    ratio: float


def bar_rows(counts: Dict[str, int]) -> List[BarRow]:
    """
    Build bar chart rows scaled to the largest count in the set.

    Returns:
        Rows in mapping order; ratio is in 0..1
    """
    if not counts:
        return []
    peak = max(1, *counts.values())
    return [BarRow(label, count, count / peak) for label, count in counts.items()]


def _parse_created_at(created_at: str) -> datetime.datetime:
    return datetime.datetime.fromisoformat(created_at.replace('Z', '+00:00'))


def trend_window(events: Iterable[TagEvent], size: int = TREND_WINDOW) -> List[TagEvent]:
    """Most recent `size` events, oldest first."""
    if size <= 0:
        return []
    events = list(events)
    try:
        ordered = sorted(events, key=lambda e: (_parse_created_at(e.created_at), e.id))
    except (ValueError, TypeError):
        # Unparseable or mixed-offset timestamps; ids follow creation order
        ordered = sorted(events, key=lambda e: e.id)
    return ordered[-size:]


def trend_points(events: List[TagEvent]) -> List[Tuple[float, float]]:
    """
    Map a trend window onto (x, y) points in a 100x40 box.

    x is spread evenly across the width; y rises with the type weight.
    """
    span = max(1, len(events) - 1)
    points: List[Tuple[float, float]] = []
    for idx, event in enumerate(events):
        weight = TYPE_WEIGHTS.get(event.type, DEFAULT_WEIGHT)
        x = idx / span * TREND_WIDTH
        y = TREND_BASELINE - weight * TREND_AMPLITUDE
        points.append((round(x, 2), round(y, 2)))
    return points


def format_timestamp(created_at: str) -> str:
    """Render a creation timestamp in local time."""
    try:
        ts = _parse_created_at(created_at)
    except ValueError:
        return created_at
    return ts.astimezone().strftime("%Y-%m-%d %H:%M:%S")
