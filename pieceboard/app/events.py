"""Board event model."""

from __future__ import annotations

from dataclasses import dataclass

from pieceboard.core.models import Point


@dataclass(frozen=True, slots=True)
class PointerDown:
    """Pointer pressed at a logical position."""

    position: Point


@dataclass(frozen=True, slots=True)
class PointerMoved:
    """Pointer moved to a logical position."""

    position: Point


@dataclass(frozen=True, slots=True)
class PointerReleased:
    """Pointer button released."""


@dataclass(frozen=True, slots=True)
class PointerLeft:
    """Pointer left the tracked surface."""


PointerInput = PointerDown | PointerMoved | PointerReleased | PointerLeft


@dataclass(frozen=True, slots=True)
class MoveCompleted:
    """Final position of a piece after one drag gesture."""

    piece_id: str
    final_position: Point

    def to_payload(self) -> dict[str, object]:
        """Return a JSON-ready mapping for external synchronization."""
        return {
            "piece_id": self.piece_id,
            "position": {"x": self.final_position.x, "y": self.final_position.y},
        }
