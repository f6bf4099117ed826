"""Background loader so HTTP calls stay off the GUI thread."""
from PyQt5.QtCore import QThread, pyqtSignal
from ..services.dashboard_service import DashboardService, DashboardError


class LoadWorker(QThread):
    """
    Runs DashboardService.load() once in a worker thread.

    Emits `loaded(events, stats)` on success or `failed(message)` with the
    user-facing notice.
    """

    loaded = pyqtSignal(object, object)
    failed = pyqtSignal(str)

    def __init__(self, service: DashboardService) -> None:
        super().__init__()
        self.service = service

    def run(self) -> None:
        try:
            events, stats = self.service.load()
        except DashboardError as e:
            self.failed.emit(e.message)
            return
        self.loaded.emit(events, stats)
