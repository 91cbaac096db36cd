"""Headless numpy framebuffer implementing the draw surface contract."""

from __future__ import annotations

import math

import numpy as np

from pieceboard.core.models import Point
from pieceboard.rendering.surface import Bounds

RGBA = tuple[int, int, int, int]


def parse_color(color: str) -> RGBA:
    """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` into an RGBA tuple."""
    value = str(color).strip()
    if not value.startswith("#"):
        raise ValueError(f"unsupported color: {color!r}")
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise ValueError(f"unsupported color: {color!r}")
    try:
        channels = [int(digits[idx : idx + 2], 16) for idx in range(0, 8, 2)]
    except ValueError as exc:
        raise ValueError(f"unsupported color: {color!r}") from exc
    return (channels[0], channels[1], channels[2], channels[3])


class RasterSurface:
    """RGBA pixel buffer sized ``logical size * pixel_ratio``.

    Drawing calls take logical coordinates; a pixel is covered when its
    center falls inside the shape.
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        pixel_ratio: float = 1.0,
        background: str = "#ffffff",
    ) -> None:
        if pixel_ratio <= 0:
            raise ValueError("pixel_ratio must be > 0")
        self._ratio = float(pixel_ratio)
        self._background = np.array(parse_color(background), dtype=np.uint8)
        device_w = max(1, int(round(float(width) * self._ratio)))
        device_h = max(1, int(round(float(height) * self._ratio)))
        self._pixels = np.empty((device_h, device_w, 4), dtype=np.uint8)
        self._pixels[:, :] = self._background
        self._xs = (np.arange(device_w, dtype=np.float64) + 0.5) / self._ratio
        self._ys = (np.arange(device_h, dtype=np.float64) + 0.5) / self._ratio

    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    @property
    def device_size(self) -> tuple[int, int]:
        return int(self._pixels.shape[1]), int(self._pixels.shape[0])

    def clear(self, bounds: Bounds) -> None:
        cols = self._span(bounds.x, bounds.x + bounds.w, axis_len=self._pixels.shape[1])
        rows = self._span(bounds.y, bounds.y + bounds.h, axis_len=self._pixels.shape[0])
        self._pixels[rows, cols] = self._background

    def fill_circle(self, center: Point, radius: float, color: str) -> None:
        rgba = parse_color(color)
        rows, cols, dist_sq = self._window(center, radius)
        if dist_sq is None:
            return
        mask = dist_sq <= radius * radius
        self._pixels[rows, cols][mask] = rgba

    def stroke_circle(self, center: Point, radius: float, width: float, color: str) -> None:
        rgba = parse_color(color)
        half = max(0.0, float(width)) / 2.0
        rows, cols, dist_sq = self._window(center, radius + half)
        if dist_sq is None:
            return
        mask = np.abs(np.sqrt(dist_sq) - radius) <= half
        self._pixels[rows, cols][mask] = rgba

    def pixel(self, point: Point) -> RGBA:
        """Return the RGBA value covering a logical point."""
        col = int(math.floor(point.x * self._ratio))
        row = int(math.floor(point.y * self._ratio))
        height, width = self._pixels.shape[:2]
        if not (0 <= col < width and 0 <= row < height):
            raise IndexError(f"point outside surface: ({point.x}, {point.y})")
        r, g, b, a = (int(channel) for channel in self._pixels[row, col])
        return (r, g, b, a)

    def to_array(self) -> np.ndarray:
        """Return a copy of the ``(height, width, 4)`` uint8 buffer."""
        return self._pixels.copy()

    def _span(self, start: float, stop: float, *, axis_len: int) -> slice:
        lo = max(0, int(math.floor(start * self._ratio)))
        hi = min(axis_len, int(math.ceil(stop * self._ratio)))
        return slice(lo, max(lo, hi))

    def _window(
        self, center: Point, extent: float
    ) -> tuple[slice, slice, np.ndarray | None]:
        cols = self._span(center.x - extent, center.x + extent, axis_len=self._pixels.shape[1])
        rows = self._span(center.y - extent, center.y + extent, axis_len=self._pixels.shape[0])
        if cols.start >= cols.stop or rows.start >= rows.stop:
            return rows, cols, None
        dx = self._xs[cols] - center.x
        dy = self._ys[rows] - center.y
        dist_sq = dx[np.newaxis, :] ** 2 + dy[:, np.newaxis] ** 2
        return rows, cols, dist_sq
