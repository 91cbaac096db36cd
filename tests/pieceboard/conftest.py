from __future__ import annotations

import pytest

from pieceboard.app.controller import InteractionController
from pieceboard.app.event_bus import EventBus
from pieceboard.app.events import MoveCompleted
from pieceboard.core.models import Piece, Point
from pieceboard.core.piece_store import PieceStore
from pieceboard.rendering.surface import Bounds


class RecordingSurface:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def clear(self, bounds: Bounds) -> None:
        self.calls.append(("clear", (bounds,)))

    def fill_circle(self, center: Point, radius: float, color: str) -> None:
        self.calls.append(("fill", (center, radius, color)))

    def stroke_circle(self, center: Point, radius: float, width: float, color: str) -> None:
        self.calls.append(("stroke", (center, radius, width, color)))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


def make_overlapping_pieces() -> tuple[Piece, ...]:
    return (
        Piece("1", Point(100.0, 100.0), "#FF4444", 1),
        Piece("2", Point(105.0, 105.0), "#44FF44", 2),
    )


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def overlapping_store() -> PieceStore:
    return PieceStore.initialize(make_overlapping_pieces())


@pytest.fixture
def controller_factory():
    def _make(pieces=None) -> tuple[InteractionController, list[MoveCompleted], list[str]]:
        store = PieceStore.initialize(make_overlapping_pieces() if pieces is None else pieces)
        bus = EventBus()
        moves: list[MoveCompleted] = []
        redraws: list[str] = []
        bus.subscribe(MoveCompleted, moves.append)
        controller = InteractionController(
            store,
            event_bus=bus,
            notify_changed=lambda: redraws.append("redraw"),
        )
        return controller, moves, redraws

    return _make
