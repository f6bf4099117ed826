"""Trend sparkline widget."""
from PyQt5.QtWidgets import QWidget
from PyQt5.QtGui import QPainter, QColor, QPaintEvent, QPen, QPainterPath
from typing import List, Tuple
from ..services.presentation_service import TREND_WIDTH

BOX_HEIGHT = 40.0


class Sparkline(QWidget):
    """Line through the trend points, stretched to the widget size."""

    def __init__(self, color: str = "#38bdf8") -> None:
        super().__init__()
        self.setFixedHeight(80)
        self.color = QColor(color)
        self.points: List[Tuple[float, float]] = []

    def set_points(self, points: List[Tuple[float, float]]) -> None:
        self.points = points
        self.update()

    def paintEvent(self, a0: QPaintEvent | None = None) -> None:
        if not self.points:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing) # pyright: ignore[reportAttributeAccessIssue]
        painter.setPen(QPen(self.color, 2))

        # Scale from the 100x40 drawing box to pixels
        sx = self.width() / TREND_WIDTH
        sy = self.height() / BOX_HEIGHT

        path = QPainterPath()
        first_x, first_y = self.points[0]
        path.moveTo(first_x * sx, first_y * sy)
        for x, y in self.points[1:]:
            path.lineTo(x * sx, y * sy)

        if len(self.points) == 1:
            painter.drawPoint(int(first_x * sx), int(first_y * sy))
        else:
            painter.drawPath(path)
        painter.end()
