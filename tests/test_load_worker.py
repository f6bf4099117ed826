"""Unit tests for the dashboard background loader."""
import unittest
from typing import Any, List
from unittest.mock import Mock
from tagtracker.models import Stats, TagEvent
from tagtracker.services.dashboard_service import DashboardError

try:
    from PyQt5.QtCore import QCoreApplication
    from tagtracker.ui.load_worker import LoadWorker
    HAVE_QT = True
except ImportError:
    HAVE_QT = False

EVENT = TagEvent(id=1, tag_id="A", source="gate-1", type="alert",
                 created_at="2025-01-01T12:00:00.000Z")


@unittest.skipUnless(HAVE_QT, "PyQt5 not available")
class TestLoadWorker(unittest.TestCase):
    """run() is executed directly so signals are delivered synchronously."""

    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def setUp(self) -> None:
        self.service = Mock()
        self.worker = LoadWorker(self.service)
        self.loaded: List[Any] = []
        self.failed: List[str] = []
        self.worker.loaded.connect(lambda events, stats: self.loaded.append((events, stats)))
        self.worker.failed.connect(self.failed.append)

    def test_emits_loaded_data(self) -> None:
        stats = Stats(total_events=1, unique_tags=1)
        self.service.load.return_value = ([EVENT], stats)

        self.worker.run()

        self.assertEqual(self.loaded, [([EVENT], stats)])
        self.assertEqual(self.failed, [])

    def test_emits_notice_on_failure(self) -> None:
        self.service.load.side_effect = DashboardError("Could not load data from server.")

        self.worker.run()

        self.assertEqual(self.loaded, [])
        self.assertEqual(self.failed, ["Could not load data from server."])


if __name__ == "__main__":
    unittest.main()
