"""Full-redraw piece renderer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pieceboard.core.geometry import PIECE_RADIUS, by_z_ascending
from pieceboard.core.models import Piece
from pieceboard.rendering.surface import Bounds, DrawSurface


@dataclass(frozen=True, slots=True)
class OutlineStyle:
    """Selection outline stroke."""

    width: float = 2.0
    color: str = "#000000"


class PieceRenderer:
    """Draw all pieces in ascending z-order with a selection outline.

    Holds configuration only; piece and selection state is passed per call.
    """

    def __init__(
        self,
        bounds: Bounds,
        *,
        radius: float = PIECE_RADIUS,
        outline: OutlineStyle | None = None,
    ) -> None:
        self._bounds = bounds
        self._radius = radius
        self._outline = outline if outline is not None else OutlineStyle()

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def render(self, surface: DrawSurface, pieces: Iterable[Piece], selected_id: str | None) -> None:
        surface.clear(self._bounds)
        for piece in by_z_ascending(pieces):
            surface.fill_circle(piece.position, self._radius, piece.color)
            if selected_id is not None and piece.id == selected_id:
                surface.stroke_circle(
                    piece.position, self._radius, self._outline.width, self._outline.color
                )
