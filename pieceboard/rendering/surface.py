"""Drawing surface contract consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pieceboard.core.models import Point


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned drawable area in logical coordinates."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def of_size(cls, width: float, height: float) -> Bounds:
        return cls(0.0, 0.0, float(width), float(height))

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the bounds."""
        return self.x <= px <= self.x + self.w and self.y <= py <= self.y + self.h


class DrawSurface(Protocol):
    """Minimal 2D drawing backend used for piece rendering."""

    def clear(self, bounds: Bounds) -> None:
        """Reset the given area to the background."""

    def fill_circle(self, center: Point, radius: float, color: str) -> None:
        """Draw a filled circle."""

    def stroke_circle(self, center: Point, radius: float, width: float, color: str) -> None:
        """Draw a circle outline."""
