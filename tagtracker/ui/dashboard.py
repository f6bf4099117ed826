"""Desktop dashboard window."""
from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QComboBox, QPushButton, QTableWidget, QTableWidgetItem, QHeaderView, QGroupBox
)
from PyQt5.QtGui import QColor, QCloseEvent
from PyQt5.QtCore import QTimer
from typing import List, Optional
from .bar_chart import BarChart
from .load_worker import LoadWorker
from .sparkline import Sparkline
from ..config import Config, EVENT_TYPES, DEFAULT_EVENT_TYPE
from ..models import Stats, TagEvent
from ..services.dashboard_service import DashboardService, DashboardError
from ..services.presentation_service import format_timestamp, trend_points, trend_window

# Colors per theme
_THEMES = {
    "dark": {"background": "#0f172a", "text": "#e2e8f0", "error": "#f87171"},
    "light": {"background": "#f1f5f9", "text": "#0f172a", "error": "#dc2626"},
}


class DashboardWindow(QWidget):
    """
    Event console: simulate-event form, live overview, trend and recent events.

    Data is refreshed on a timer and after every successful submit.
    """

    def __init__(self, service: DashboardService, settings: Optional[Config] = None) -> None:
        super().__init__()
        self.service = service
        self.settings = settings or Config(config_path=None)
        self.theme = self.settings.theme
        self.events: List[TagEvent] = []
        self.stats: Optional[Stats] = None
        self.load_worker: Optional[LoadWorker] = None

        self.setWindowTitle("Smart Tag Event Console")
        self.setMinimumWidth(720)

        self.main_layout = QVBoxLayout()
        self.setLayout(self.main_layout)

        self.create_header()
        self.create_form_and_overview()
        self.create_trend()
        self.create_events_table()

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.refresh)
        self.timer.start(self.settings.refresh_interval_ms)

        self.apply_theme()
        self.refresh()

    def create_header(self) -> None:
        header = QHBoxLayout()
        header.addWidget(QLabel("<h2>Unified event operations</h2>"))
        header.addStretch()
        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self.toggle_theme)
        header.addWidget(self.theme_button)
        self.main_layout.addLayout(header)

        self.error_label = QLabel()
        self.error_label.setVisible(False)
        self.main_layout.addWidget(self.error_label)

    def create_form_and_overview(self) -> None:
        """Create the 'Simulate event' form next to the 'Live overview' panel."""
        row = QHBoxLayout()

        form_box = QGroupBox("Simulate event")
        form = QGridLayout()
        form_box.setLayout(form)
        self.tag_input = QLineEdit()
        self.tag_input.setPlaceholderText("e.g. NFC-101, device-01")
        self.source_input = QLineEdit()
        self.source_input.setPlaceholderText("e.g. gate-1, kiosk-3")
        self.type_combo = QComboBox()
        self.type_combo.addItems(list(EVENT_TYPES))
        self.submit_button = QPushButton("Add event")
        self.submit_button.clicked.connect(self.submit_event)

        form.addWidget(QLabel("Tag ID"), 0, 0)
        form.addWidget(self.tag_input, 0, 1)
        form.addWidget(QLabel("Source"), 1, 0)
        form.addWidget(self.source_input, 1, 1)
        form.addWidget(QLabel("Event type"), 2, 0)
        form.addWidget(self.type_combo, 2, 1)
        form.addWidget(self.submit_button, 3, 1)
        row.addWidget(form_box)

        overview_box = QGroupBox("Live overview")
        overview = QVBoxLayout()
        overview_box.setLayout(overview)
        self.total_label = QLabel("Total events: --")
        self.unique_label = QLabel("Unique tags: --")
        overview.addWidget(self.total_label)
        overview.addWidget(self.unique_label)
        overview.addWidget(QLabel("<b>Type load</b>"))
        self.type_chart = BarChart("#38bdf8", "Awaiting events…")
        overview.addWidget(self.type_chart)
        overview.addWidget(QLabel("<b>Source load</b>"))
        self.source_chart = BarChart("#a78bfa", "Awaiting sources…")
        overview.addWidget(self.source_chart)
        row.addWidget(overview_box)

        self.main_layout.addLayout(row)

    def create_trend(self) -> None:
        trend_box = QGroupBox("Traffic trend")
        layout = QVBoxLayout()
        trend_box.setLayout(layout)
        self.samples_label = QLabel("Idle")
        layout.addWidget(self.samples_label)
        self.sparkline = Sparkline()
        layout.addWidget(self.sparkline)
        self.main_layout.addWidget(trend_box)

    def create_events_table(self) -> None:
        events_box = QGroupBox("Recent events")
        layout = QVBoxLayout()
        events_box.setLayout(layout)

        self.refresh_button = QPushButton("Refresh")
        self.refresh_button.clicked.connect(self.refresh)
        layout.addWidget(self.refresh_button)

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Tag", "Source", "Type", "Time"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch) # pyright: ignore[reportOptionalMemberAccess]
        self.table.setEditTriggers(QTableWidget.NoEditTriggers) # pyright: ignore[reportAttributeAccessIssue]
        layout.addWidget(self.table)
        self.main_layout.addWidget(events_box)

    def refresh(self) -> None:
        """Reload events and stats from the server in the background."""
        # Skip timer ticks while a load is still in flight
        if self.load_worker is not None:
            return

        self.refresh_button.setEnabled(False)
        self.load_worker = LoadWorker(self.service)
        self.load_worker.loaded.connect(self.on_loaded)
        self.load_worker.failed.connect(self.show_error)
        self.load_worker.finished.connect(self.on_load_finished)
        self.load_worker.start()

    def on_load_finished(self) -> None:
        if self.load_worker is not None:
            self.load_worker.wait()
        self.load_worker = None
        self.refresh_button.setEnabled(True)

    def on_loaded(self, events: List[TagEvent], stats: Stats) -> None:
        """Render freshly loaded data."""
        self.events, self.stats = events, stats
        self.show_error(None)
        self.update_overview()
        self.update_trend()
        self.update_table()

    def closeEvent(self, a0: QCloseEvent | None) -> None:
        """Let an in-flight load finish before the window goes away."""
        self.timer.stop()
        if self.load_worker is not None:
            self.load_worker.wait()
        super().closeEvent(a0)

    def submit_event(self) -> None:
        """Post the form contents as a new event."""
        tag_id = self.tag_input.text().strip()
        source = self.source_input.text().strip()
        type_ = self.type_combo.currentText()
        if not tag_id or not source or not type_:
            return

        self.submit_button.setEnabled(False)
        self.submit_button.setText("Saving...")
        try:
            self.service.submit(tag_id, source, type_)
        except DashboardError as e:
            self.show_error(e.message)
            return
        finally:
            self.submit_button.setEnabled(True)
            self.submit_button.setText("Add event")

        self.tag_input.clear()
        self.source_input.clear()
        self.type_combo.setCurrentText(DEFAULT_EVENT_TYPE)
        self.refresh()

    def update_overview(self) -> None:
        if self.stats is None:
            return
        self.total_label.setText(f"Total events: <b>{self.stats.total_events}</b>")
        self.unique_label.setText(f"Unique tags: <b>{self.stats.unique_tags}</b>")
        self.type_chart.set_counts(self.stats.events_by_type)
        self.source_chart.set_counts(self.stats.events_by_source)

    def update_trend(self) -> None:
        window = trend_window(self.events, self.settings.trend_window)
        self.samples_label.setText(f"{len(window)} samples" if window else "Idle")
        self.sparkline.set_points(trend_points(window))

    def update_table(self) -> None:
        self.table.setRowCount(len(self.events))
        for row, event in enumerate(self.events):
            values = (event.tag_id, event.source, event.type, format_timestamp(event.created_at))
            for col, value in enumerate(values):
                self.table.setItem(row, col, QTableWidgetItem(value))

    def show_error(self, message: Optional[str]) -> None:
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))

    def toggle_theme(self) -> None:
        """Switch between dark and light for this session."""
        self.theme = "light" if self.theme == "dark" else "dark"
        self.apply_theme()

    def apply_theme(self) -> None:
        colors = _THEMES[self.theme]
        self.setStyleSheet(
            f"QWidget {{ background: {colors['background']}; color: {colors['text']}; }}"
        )
        self.error_label.setStyleSheet(f"color: {colors['error']}; font-weight: bold;")
        self.theme_button.setText("Light mode" if self.theme == "light" else "Dark mode")
        text_color = QColor(colors["text"])
        self.type_chart.set_text_color(text_color)
        self.source_chart.set_text_color(text_color)
