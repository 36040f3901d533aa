"""Qt canvas that hosts the sketch board."""
from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import QPointF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import QWidget

from roughsketch.board import SketchBoard
from roughsketch.render_bridge import RenderBridge
from roughsketch.renderer import Drawable

logger = logging.getLogger(__name__)


def paint_drawable(painter: QPainter, drawable: Drawable) -> None:
    """Stroke every polyline of ``drawable`` with its own pen settings."""
    opts = drawable.options
    pen = QPen(QColor(opts.stroke_color))
    pen.setWidthF(float(opts.stroke_width))
    pen.setCapStyle(Qt.RoundCap)
    pen.setJoinStyle(Qt.RoundJoin)
    painter.setPen(pen)
    painter.setBrush(Qt.NoBrush)
    for stroke in drawable.strokes:
        if len(stroke) < 2:
            continue
        polygon = QPolygonF([QPointF(float(x), float(y)) for x, y in stroke])
        painter.drawPolyline(polygon)


class Canvas(QWidget):
    """Drawing surface: keeps a display list and forwards mouse input to the board."""

    status_changed = Signal(dict)

    def __init__(self, board: SketchBoard, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("SketchCanvas")
        self.setMinimumSize(QSize(320, 240))
        self.setMouseTracking(True)
        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(self.backgroundRole(), QColor(255, 255, 255))
        self.setPalette(palette)

        self._display: List[Drawable] = []
        self.board = board
        self.bridge = RenderBridge(self)
        self.board.set_on_change(self._on_shapes_changed)

    # ------------------------------------------------------------------
    # Surface protocol
    def clear(self) -> None:
        self._display.clear()
        self.update()

    def draw(self, renderable: Drawable) -> None:
        self._display.append(renderable)
        self.update()

    def display_list(self) -> List[Drawable]:
        return list(self._display)

    # ------------------------------------------------------------------
    def set_tool(self, tool) -> None:
        self.board.set_tool(tool)
        self.setCursor(Qt.ArrowCursor)
        self._emit_status()

    def _on_shapes_changed(self, shapes) -> None:
        self.bridge.render(shapes)
        self._emit_status()

    def _emit_status(self) -> None:
        self.status_changed.emit(self.board.status())

    def _update_cursor(self, x: float, y: float) -> None:
        hint = self.board.cursor_at(x, y)
        self.setCursor(Qt.SizeAllCursor if hint == "move" else Qt.ArrowCursor)

    # ------------------------------------------------------------------
    # Painting
    def paintEvent(self, event):  # pragma: no cover - GUI entry point
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        for drawable in self._display:
            paint_drawable(painter, drawable)
        painter.end()

    # ------------------------------------------------------------------
    # Event forwarding to the board
    def resizeEvent(self, event):  # pragma: no cover - GUI layout handling
        super().resizeEvent(event)
        size = event.size()
        logger.debug("Canvas resized to %dx%d", size.width(), size.height())

    def mousePressEvent(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        self.board.pointer_down(pos.x(), pos.y())
        self._emit_status()

    def mouseMoveEvent(self, event):  # pragma: no cover - GUI entry point
        pos = event.position()
        if event.buttons() & Qt.LeftButton:
            self.board.pointer_move(pos.x(), pos.y())
        else:
            self._update_cursor(pos.x(), pos.y())

    def mouseReleaseEvent(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        self.board.pointer_up(pos.x(), pos.y())
        self._emit_status()
