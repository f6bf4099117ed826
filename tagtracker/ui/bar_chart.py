"""Horizontal bar chart widget."""
from PyQt5.QtWidgets import QWidget
from PyQt5.QtGui import QPainter, QColor, QPaintEvent
from PyQt5.QtCore import Qt, QRect
from typing import Dict, List
from ..services.presentation_service import BarRow, bar_rows

ROW_HEIGHT = 22
LABEL_WIDTH = 90
VALUE_WIDTH = 40


class BarChart(QWidget):
    """Bars scaled to the largest count currently displayed."""

    def __init__(self, color: str = "#38bdf8", empty_text: str = "Awaiting events…") -> None:
        super().__init__()
        self.color = QColor(color)
        self.track_color = QColor(148, 163, 184, 50)
        self.text_color = QColor("#e2e8f0")
        self.empty_text = empty_text
        self.rows: List[BarRow] = []
        self.setMinimumHeight(ROW_HEIGHT)

    def set_counts(self, counts: Dict[str, int]) -> None:
        """Replace the displayed counts."""
        self.rows = bar_rows(counts)
        self.setMinimumHeight(max(1, len(self.rows)) * ROW_HEIGHT)
        self.update()

    def set_text_color(self, color: QColor) -> None:
        self.text_color = color
        self.update()

    def paintEvent(self, a0: QPaintEvent | None = None) -> None:
        """Draw one labelled bar per row."""
        painter = QPainter(self)
        painter.setPen(self.text_color)

        if not self.rows:
            painter.drawText(self.rect(), int(Qt.AlignLeft | Qt.AlignVCenter), self.empty_text) # pyright: ignore[reportAttributeAccessIssue]
            painter.end()
            return

        track_width = max(1, self.width() - LABEL_WIDTH - VALUE_WIDTH)
        for i, row in enumerate(self.rows):
            y = i * ROW_HEIGHT
            label_rect = QRect(0, y, LABEL_WIDTH - 6, ROW_HEIGHT)
            painter.drawText(label_rect, int(Qt.AlignLeft | Qt.AlignVCenter), row.label) # pyright: ignore[reportAttributeAccessIssue]

            bar_y = y + ROW_HEIGHT // 2 - 5
            painter.fillRect(LABEL_WIDTH, bar_y, track_width, 10, self.track_color)
            painter.fillRect(LABEL_WIDTH, bar_y, max(1, int(row.ratio * track_width)), 10, self.color)

            value_rect = QRect(LABEL_WIDTH + track_width, y, VALUE_WIDTH, ROW_HEIGHT)
            painter.drawText(value_rect, int(Qt.AlignRight | Qt.AlignVCenter), str(row.count)) # pyright: ignore[reportAttributeAccessIssue]

        painter.end()
