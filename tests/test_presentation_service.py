"""Unit tests for dashboard presentation helpers."""
import unittest
from tagtracker.models import TagEvent
from tagtracker.services.presentation_service import (
    bar_rows, format_timestamp, trend_points, trend_window
)


def _event(id_: int, type_: str = "check-in", minute: int = 0) -> TagEvent:
    return TagEvent(
        id=id_, tag_id=f"T{id_}", source="gate-1", type=type_,
        created_at=f"2025-01-01T12:{minute:02d}:00.000Z"
    )


class TestBarRows(unittest.TestCase):
    """Bars are scaled to the local maximum."""

    def test_empty_counts(self) -> None:
        self.assertEqual(bar_rows({}), [])

    def test_ratio_relative_to_max(self) -> None:
        rows = bar_rows({"alert": 4, "status": 2, "check-in": 1})

        self.assertEqual([r.label for r in rows], ["alert", "status", "check-in"])
        self.assertEqual([r.ratio for r in rows], [1.0, 0.5, 0.25])

    def test_single_row_is_full(self) -> None:
        rows = bar_rows({"gate-1": 7})

        self.assertEqual(rows[0].count, 7)
        self.assertEqual(rows[0].ratio, 1.0)


class TestTrend(unittest.TestCase):
    """Trend window and sparkline points."""

    def test_window_is_oldest_first_and_bounded(self) -> None:
        events = [_event(i, minute=i) for i in range(20, 0, -1)]  # newest first

        window = trend_window(events, size=12)

        self.assertEqual(len(window), 12)
        self.assertEqual([e.id for e in window], list(range(9, 21)))

    def test_window_smaller_than_size(self) -> None:
        events = [_event(2, minute=2), _event(1, minute=1)]

        self.assertEqual([e.id for e in trend_window(events)], [1, 2])

    def test_window_zero_size(self) -> None:
        self.assertEqual(trend_window([_event(1)], size=0), [])

    def test_window_falls_back_to_id_order_on_bad_timestamp(self) -> None:
        events = [_event(3, minute=3), _event(2, minute=2), _event(1, minute=1)]
        events[1] = TagEvent(id=2, tag_id="T2", source="gate-1", type="alert", created_at="soon")

        window = trend_window(events, size=2)

        self.assertEqual([e.id for e in window], [2, 3])

    def test_points_spread_across_width(self) -> None:
        window = [_event(1, "alert"), _event(2, "status"), _event(3, "check-in")]

        points = trend_points(window)

        self.assertEqual(points, [(0.0, 17.0), (50.0, 23.0), (100.0, 27.0)])

    def test_single_point_at_origin(self) -> None:
        self.assertEqual(trend_points([_event(1, "unknown")]), [(0.0, 27.0)])

    def test_points_are_deterministic(self) -> None:
        window = [_event(i, "alert") for i in range(5)]

        self.assertEqual(trend_points(window), trend_points(window))


class TestFormatTimestamp(unittest.TestCase):

    def test_formats_iso_timestamp(self) -> None:
        self.assertRegex(format_timestamp("2025-01-01T12:00:00.000Z"),
                         r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

    def test_invalid_timestamp_returned_as_is(self) -> None:
        self.assertEqual(format_timestamp("yesterday"), "yesterday")


if __name__ == "__main__":
    unittest.main()
