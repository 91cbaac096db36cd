"""Hit-testing and z-order helpers."""

from __future__ import annotations

from collections.abc import Iterable

from pieceboard.core.models import Piece, Point

# Drawn circle radius and hit radius; the renderer imports this value.
PIECE_RADIUS = 20.0


def distance_squared(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def is_hit(point: Point, piece: Piece, radius: float = PIECE_RADIUS) -> bool:
    """Return whether a point falls inside the piece circle, edge included."""
    return distance_squared(point, piece.position) <= radius * radius


def by_z_ascending(pieces: Iterable[Piece]) -> list[Piece]:
    """Draw order; equal z keeps input order."""
    return sorted(pieces, key=lambda piece: piece.z_index)


def by_z_descending(pieces: Iterable[Piece]) -> list[Piece]:
    """Hit-test order; equal z keeps input order."""
    # sorted(reverse=True) stays stable for equal keys.
    return sorted(pieces, key=lambda piece: piece.z_index, reverse=True)


def topmost_hit(
    point: Point,
    pieces: Iterable[Piece],
    radius: float = PIECE_RADIUS,
) -> Piece | None:
    """Return the highest-z piece under the point, or None.

    Ties on ``z_index`` resolve to the piece appearing first in ``pieces``.
    """
    for piece in by_z_descending(pieces):
        if is_hit(point, piece, radius):
            return piece
    return None
