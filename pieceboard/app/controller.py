"""Pointer interaction controller for selecting and dragging pieces."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pieceboard.app.event_bus import EventBus
from pieceboard.app.events import MoveCompleted
from pieceboard.app.state_machine import InteractionState
from pieceboard.core.errors import NotFoundError
from pieceboard.core.geometry import PIECE_RADIUS, topmost_hit
from pieceboard.core.models import Point
from pieceboard.core.piece_store import PieceStore

logger = logging.getLogger(__name__)

_ORIGIN = Point(0.0, 0.0)


@dataclass(slots=True)
class DragState:
    """In-progress drag gesture."""

    active: bool = False
    dragged_id: str | None = None
    pointer_offset: Point = field(default=_ORIGIN)

    def clear(self) -> None:
        self.active = False
        self.dragged_id = None
        self.pointer_offset = _ORIGIN


class InteractionController:
    """Owns selection and drag state and applies pointer input to the store.

    Every handler returns ``True`` when selection or piece positions changed,
    and calls ``notify_changed`` in exactly those cases so the host can redraw.
    """

    def __init__(
        self,
        store: PieceStore,
        *,
        event_bus: EventBus | None = None,
        notify_changed: Callable[[], None] | None = None,
        radius: float = PIECE_RADIUS,
        debug_input: bool = False,
    ) -> None:
        self._store = store
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self._notify_changed = notify_changed
        self._radius = radius
        self._debug = debug_input
        self._state = InteractionState.IDLE
        self._selected_id: str | None = None
        self._drag = DragState()

    @property
    def store(self) -> PieceStore:
        return self._store

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def set_notify_changed(self, callback: Callable[[], None] | None) -> None:
        self._notify_changed = callback

    def state(self) -> InteractionState:
        return self._state

    def selected_id(self) -> str | None:
        """Return selected piece id, or None when nothing valid is selected."""
        if self._selected_id is not None and self._selected_id not in self._store:
            return None
        return self._selected_id

    def drag_state(self) -> DragState:
        """Return a copy of the current drag state."""
        return DragState(
            active=self._drag.active,
            dragged_id=self._drag.dragged_id,
            pointer_offset=self._drag.pointer_offset,
        )

    def pointer_down(self, point: Point) -> bool:
        """Select the topmost piece under the pointer and start dragging it."""
        changed = False
        self._drop_stale_selection()
        if self._state is InteractionState.DRAGGING:
            # A release was missed (focus loss); commit the open gesture first.
            changed = self._finish_drag()
        if self._debug:
            logger.debug("pointer_down x=%.1f y=%.1f", point.x, point.y)
        hit = topmost_hit(point, self._store.sorted_by_z_descending(), self._radius)
        if hit is None:
            if self._selected_id is not None:
                logger.debug("selection_cleared piece_id=%s", self._selected_id)
                self._selected_id = None
                changed = True
            return self._changed(changed)
        if self._selected_id != hit.id:
            self._selected_id = hit.id
            changed = True
        self._drag.active = True
        self._drag.dragged_id = hit.id
        self._drag.pointer_offset = point - hit.position
        self._state = InteractionState.DRAGGING
        logger.debug(
            "drag_started piece_id=%s offset_x=%.1f offset_y=%.1f",
            hit.id,
            self._drag.pointer_offset.x,
            self._drag.pointer_offset.y,
        )
        return self._changed(changed)

    def pointer_move(self, point: Point) -> bool:
        """Move the dragged piece, keeping the grab offset constant."""
        if self._state is not InteractionState.DRAGGING or self._drag.dragged_id is None:
            return False
        if self._debug:
            logger.debug("pointer_move x=%.1f y=%.1f", point.x, point.y)
        dragged_id = self._drag.dragged_id
        try:
            self._store.update_position(dragged_id, point - self._drag.pointer_offset)
        except NotFoundError:
            logger.warning("drag_target_missing piece_id=%s", dragged_id)
            self._drag.clear()
            self._state = InteractionState.IDLE
            self._drop_stale_selection()
            return False
        return self._changed(True)

    def pointer_up(self) -> bool:
        """End the drag and publish the final position."""
        if self._debug:
            logger.debug("pointer_up state=%s", self._state.name)
        return self._changed(self._finish_drag())

    def pointer_leave(self) -> bool:
        """Treat leaving the surface exactly like a release."""
        if self._debug:
            logger.debug("pointer_leave state=%s", self._state.name)
        return self._changed(self._finish_drag())

    def _finish_drag(self) -> bool:
        if self._state is not InteractionState.DRAGGING:
            return False
        dragged_id = self._drag.dragged_id
        self._drag.clear()
        self._state = InteractionState.IDLE
        piece = None if dragged_id is None else self._store.get(dragged_id)
        if piece is None:
            return False
        self._event_bus.publish(MoveCompleted(piece_id=piece.id, final_position=piece.position))
        # Selection is kept and no piece moved; nothing to redraw.
        return False

    def _drop_stale_selection(self) -> None:
        # selected_id() already hides a stale id, so dropping it draws nothing new.
        if self._selected_id is None or self._selected_id in self._store:
            return
        logger.debug("selection_dropped piece_id=%s", self._selected_id)
        self._selected_id = None

    def _changed(self, changed: bool) -> bool:
        if changed and self._notify_changed is not None:
            self._notify_changed()
        return changed
