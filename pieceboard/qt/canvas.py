"""Qt canvas hosting board rendering and pointer interaction."""

from __future__ import annotations

from pieceboard.app.session import BoardSession
from pieceboard.app.state_machine import InteractionState
from pieceboard.core.models import Point
from pieceboard.rendering.surface import Bounds
from pieceboard.rendering.surface_adapter import SurfaceAdapter

try:
    from PyQt6.QtCore import QPointF, QRectF, Qt
    from PyQt6.QtGui import QColor, QMouseEvent, QPainter, QPen
    from PyQt6.QtWidgets import QWidget
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class QtPainterSurface:
    """Draw surface backed by an active QPainter."""

    def __init__(self, painter: QPainter, background: str = "#ffffff") -> None:
        self._painter = painter
        self._background = QColor(background)

    def clear(self, bounds: Bounds) -> None:
        self._painter.fillRect(QRectF(bounds.x, bounds.y, bounds.w, bounds.h), self._background)

    def fill_circle(self, center: Point, radius: float, color: str) -> None:
        self._painter.setPen(Qt.PenStyle.NoPen)
        self._painter.setBrush(QColor(color))
        self._painter.drawEllipse(QPointF(center.x, center.y), radius, radius)

    def stroke_circle(self, center: Point, radius: float, width: float, color: str) -> None:
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.setPen(QPen(QColor(color), width))
        self._painter.drawEllipse(QPointF(center.x, center.y), radius, radius)


class PieceCanvas(QWidget):
    def __init__(
        self,
        session: BoardSession,
        adapter: SurfaceAdapter,
        *,
        background: str = "#ffffff",
        pixel_ratio_override: float = 0.0,
    ) -> None:
        super().__init__()
        self._session = session
        self._adapter = adapter
        self._background = background
        self._pixel_ratio_override = pixel_ratio_override
        width, height = adapter.logical_size
        self.setMinimumSize(int(width), int(height))
        self.setMouseTracking(True)
        self._sync_pixel_ratio()
        session.attach_redraw(self.repaint)

    def _sync_pixel_ratio(self) -> None:
        if self._pixel_ratio_override > 0:
            ratio = self._pixel_ratio_override
        else:
            ratio = float(self.devicePixelRatioF())
        if ratio != self._adapter.pixel_ratio:
            self._adapter.set_pixel_ratio(ratio)
        self._adapter.resize(self.width() * ratio, self.height() * ratio)

    def _to_logical(self, event: QMouseEvent) -> Point:
        self._sync_pixel_ratio()
        ratio = self._adapter.pixel_ratio
        position = event.position()
        return self._adapter.to_logical(position.x() * ratio, position.y() * ratio)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        self._sync_pixel_ratio()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), QColor(self._background))
        scale, offset_x, offset_y = self._adapter.view_transform()
        painter.translate(offset_x, offset_y)
        painter.scale(scale, scale)
        self._session.render(QtPainterSurface(painter, self._background))
        painter.end()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        self._sync_pixel_ratio()
        super().resizeEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self._session.pointer_down(self._to_logical(event))

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if (
            self._session.state() is InteractionState.DRAGGING
            and not self.rect().contains(event.position().toPoint())
        ):
            # The implicit mouse grab holds leaveEvent back until release.
            self._session.pointer_leave()
            return
        self._session.pointer_move(self._to_logical(event))

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self._session.pointer_up()

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        self._session.pointer_leave()
        super().leaveEvent(event)
