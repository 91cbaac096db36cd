"""Board session wiring store, controller, renderer and a surface."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pieceboard.app.controller import DragState, InteractionController
from pieceboard.app.event_bus import EventBus, Subscription
from pieceboard.app.events import (
    MoveCompleted,
    PointerDown,
    PointerInput,
    PointerLeft,
    PointerMoved,
    PointerReleased,
)
from pieceboard.app.state_machine import InteractionState
from pieceboard.core.models import Piece, Point
from pieceboard.core.piece_store import PieceStore
from pieceboard.rendering.renderer import OutlineStyle, PieceRenderer
from pieceboard.rendering.surface import Bounds, DrawSurface

logger = logging.getLogger(__name__)


def log_move_completed(event: MoveCompleted) -> None:
    logger.info(
        "move_completed piece_id=%s x=%.1f y=%.1f",
        event.piece_id,
        event.final_position.x,
        event.final_position.y,
        extra={"move": event.to_payload()},
    )


class BoardSession:
    """Runs pointer input through the controller and redraws on every change.

    ``redraw`` overrides the default of rendering into ``surface``; hosts that
    paint asynchronously (Qt paint events) pass their own repaint trigger and
    call ``render`` from the paint handler.
    """

    def __init__(
        self,
        pieces: Iterable[Piece],
        *,
        canvas_width: float,
        canvas_height: float,
        surface: DrawSurface | None = None,
        redraw: Callable[[], None] | None = None,
        outline: OutlineStyle | None = None,
        event_bus: EventBus | None = None,
        debug_input: bool = False,
    ) -> None:
        store = PieceStore.initialize(pieces)
        self._bus = event_bus if event_bus is not None else EventBus()
        self._renderer = PieceRenderer(Bounds.of_size(canvas_width, canvas_height), outline=outline)
        self._surface = surface
        self._redraw = redraw
        self._frames = 0
        self._controller = InteractionController(
            store,
            event_bus=self._bus,
            notify_changed=self.request_redraw,
            debug_input=debug_input,
        )
        self._bus.subscribe(MoveCompleted, log_move_completed)
        logger.info(
            "board_session_ready pieces=%d canvas=%dx%d",
            len(store),
            int(canvas_width),
            int(canvas_height),
        )
        self.request_redraw()

    @property
    def controller(self) -> InteractionController:
        return self._controller

    @property
    def renderer(self) -> PieceRenderer:
        return self._renderer

    @property
    def event_bus(self) -> EventBus:
        return self._bus

    def frames_rendered(self) -> int:
        return self._frames

    def pieces(self) -> tuple[Piece, ...]:
        return self._controller.store.pieces()

    def piece(self, piece_id: str) -> Piece | None:
        return self._controller.store.get(piece_id)

    def selected_id(self) -> str | None:
        return self._controller.selected_id()

    def state(self) -> InteractionState:
        return self._controller.state()

    def drag_state(self) -> DragState:
        return self._controller.drag_state()

    def on_move_completed(self, handler: Callable[[MoveCompleted], None]) -> Subscription:
        return self._bus.subscribe(MoveCompleted, handler)

    def pointer_down(self, point: Point) -> bool:
        return self._controller.pointer_down(point)

    def pointer_move(self, point: Point) -> bool:
        return self._controller.pointer_move(point)

    def pointer_up(self) -> bool:
        return self._controller.pointer_up()

    def pointer_leave(self) -> bool:
        return self._controller.pointer_leave()

    def dispatch(self, event: PointerInput) -> bool:
        """Route one typed pointer event."""
        if isinstance(event, PointerDown):
            return self.pointer_down(event.position)
        if isinstance(event, PointerMoved):
            return self.pointer_move(event.position)
        if isinstance(event, PointerReleased):
            return self.pointer_up()
        if isinstance(event, PointerLeft):
            return self.pointer_leave()
        raise TypeError(f"unsupported pointer event: {type(event).__name__}")

    def render(self, surface: DrawSurface) -> None:
        """Draw current pieces and selection onto a surface."""
        self._renderer.render(surface, self.pieces(), self.selected_id())
        self._frames += 1

    def attach_redraw(self, redraw: Callable[[], None] | None) -> None:
        """Replace the redraw trigger and redraw once through it."""
        self._redraw = redraw
        self.request_redraw()

    def request_redraw(self) -> None:
        if self._redraw is not None:
            self._redraw()
            return
        if self._surface is not None:
            self.render(self._surface)
