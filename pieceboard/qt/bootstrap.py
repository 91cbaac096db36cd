"""Qt frontend bootstrap and runtime wiring."""

from __future__ import annotations

import logging

from pieceboard.app.session import BoardSession
from pieceboard.core.models import default_pieces
from pieceboard.infra.config import BoardConfig
from pieceboard.qt.canvas import PieceCanvas
from pieceboard.rendering.renderer import OutlineStyle
from pieceboard.rendering.surface_adapter import SurfaceAdapter

try:
    from PyQt6.QtWidgets import QApplication, QMainWindow
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, session: BoardSession, config: BoardConfig) -> None:
        super().__init__()
        self._session = session
        adapter = SurfaceAdapter(config.canvas_width, config.canvas_height)
        self._canvas = PieceCanvas(
            session,
            adapter,
            background=config.background,
            pixel_ratio_override=config.pixel_ratio,
        )
        self.setCentralWidget(self._canvas)
        self.setWindowTitle(config.window_title)
        session.attach_redraw(self._redraw)

    def _redraw(self) -> None:
        self._canvas.repaint()
        selected = self._session.selected_id()
        self.statusBar().showMessage(f"Selected Piece: #{selected}" if selected else "Selected Piece: None")


def build_session(config: BoardConfig) -> BoardSession:
    return BoardSession(
        default_pieces(),
        canvas_width=config.canvas_width,
        canvas_height=config.canvas_height,
        outline=OutlineStyle(width=config.outline_width, color=config.outline_color),
        debug_input=config.debug_input,
    )


def run_qt_app(config: BoardConfig) -> int:
    """Build the window and run the Qt event loop."""
    app = QApplication.instance() or QApplication([])
    session = build_session(config)
    window = MainWindow(session, config)
    window.show()
    logger.info("qt_window_shown title=%s", config.window_title)
    return int(app.exec())
