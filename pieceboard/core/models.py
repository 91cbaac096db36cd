"""Core domain models used by board logic."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CANVAS_WIDTH = 800
DEFAULT_CANVAS_HEIGHT = 600


@dataclass(frozen=True, slots=True)
class Point:
    """Position or offset in logical surface coordinates."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class Piece:
    """Uniquely identified circular piece."""

    id: str
    position: Point
    color: str
    z_index: int = 0

    def moved_to(self, position: Point) -> Piece:
        return Piece(id=self.id, position=position, color=self.color, z_index=self.z_index)


def default_pieces() -> tuple[Piece, ...]:
    """Starting piece set for a fresh board."""
    return (
        Piece("1", Point(100.0, 100.0), "#FF4444", 1),
        Piece("2", Point(200.0, 150.0), "#44FF44", 2),
        Piece("3", Point(300.0, 200.0), "#4444FF", 3),
    )
