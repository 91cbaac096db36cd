"""Piece rendering and surface backends."""

from pieceboard.rendering.raster import RasterSurface
from pieceboard.rendering.renderer import OutlineStyle, PieceRenderer
from pieceboard.rendering.surface import Bounds, DrawSurface
from pieceboard.rendering.surface_adapter import SurfaceAdapter

__all__ = [
    "Bounds",
    "DrawSurface",
    "OutlineStyle",
    "PieceRenderer",
    "RasterSurface",
    "SurfaceAdapter",
]
