"""Device-to-logical coordinate mapping at the host boundary."""

from __future__ import annotations

from pieceboard.core.models import Point


class SurfaceAdapter:
    """Map raw view coordinates into logical canvas coordinates.

    Raw coordinates are device pixels of a view that may be larger or smaller
    than the logical canvas. The canvas is fitted into the view preserving
    aspect ratio and centered.
    """

    def __init__(self, logical_width: float, logical_height: float, *, pixel_ratio: float = 1.0) -> None:
        if logical_width <= 0 or logical_height <= 0:
            raise ValueError("logical canvas size must be positive")
        self._logical_w = float(logical_width)
        self._logical_h = float(logical_height)
        self._ratio = 1.0
        self._view_w = self._logical_w
        self._view_h = self._logical_h
        self.set_pixel_ratio(pixel_ratio)

    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    @property
    def logical_size(self) -> tuple[float, float]:
        return self._logical_w, self._logical_h

    def set_pixel_ratio(self, pixel_ratio: float) -> None:
        """Set device pixel ratio; the view keeps its logical extent."""
        ratio = float(pixel_ratio) if pixel_ratio > 0 else 1.0
        logical_view_w = self._view_w / self._ratio
        logical_view_h = self._view_h / self._ratio
        self._ratio = ratio
        self._view_w = logical_view_w * ratio
        self._view_h = logical_view_h * ratio

    def resize(self, view_width: float, view_height: float) -> None:
        """Record the host view size in device pixels."""
        self._view_w = max(1.0, float(view_width))
        self._view_h = max(1.0, float(view_height))

    def view_transform(self) -> tuple[float, float, float]:
        """Return ``(scale, offset_x, offset_y)`` in device-independent view units."""
        view_w = self._view_w / self._ratio
        view_h = self._view_h / self._ratio
        scale = min(view_w / self._logical_w, view_h / self._logical_h)
        offset_x = (view_w - self._logical_w * scale) * 0.5
        offset_y = (view_h - self._logical_h * scale) * 0.5
        return scale, offset_x, offset_y

    def to_logical(self, x: float, y: float) -> Point:
        scale, offset_x, offset_y = self.view_transform()
        vx = float(x) / self._ratio
        vy = float(y) / self._ratio
        return Point((vx - offset_x) / scale, (vy - offset_y) / scale)

    def to_device(self, point: Point) -> tuple[float, float]:
        scale, offset_x, offset_y = self.view_transform()
        return (
            (offset_x + point.x * scale) * self._ratio,
            (offset_y + point.y * scale) * self._ratio,
        )
