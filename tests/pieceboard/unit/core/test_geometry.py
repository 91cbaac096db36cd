from __future__ import annotations

from pieceboard.core.geometry import (
    PIECE_RADIUS,
    by_z_ascending,
    by_z_descending,
    distance_squared,
    is_hit,
    topmost_hit,
)
from pieceboard.core.models import Piece, Point


def test_distance_squared() -> None:
    assert distance_squared(Point(0, 0), Point(3, 4)) == 25
    assert distance_squared(Point(1.5, -2), Point(1.5, -2)) == 0


def test_is_hit_includes_edge_and_rejects_just_outside() -> None:
    piece = Piece("a", Point(50.0, 50.0), "#000", 0)
    assert is_hit(Point(50.0, 50.0), piece)
    assert is_hit(Point(50.0 + PIECE_RADIUS, 50.0), piece)
    assert not is_hit(Point(50.0 + PIECE_RADIUS + 1e-6, 50.0), piece)
    assert not is_hit(Point(50.0, 50.0 - PIECE_RADIUS - 0.01), piece)


def test_is_hit_with_custom_radius() -> None:
    piece = Piece("a", Point(0.0, 0.0), "#000", 0)
    assert is_hit(Point(3.0, 4.0), piece, radius=5.0)
    assert not is_hit(Point(3.0, 4.1), piece, radius=5.0)


def test_topmost_hit_prefers_highest_z() -> None:
    low = Piece("1", Point(100.0, 100.0), "#f00", 1)
    high = Piece("2", Point(105.0, 105.0), "#0f0", 2)
    assert topmost_hit(Point(102.0, 102.0), [low, high]) is high
    assert topmost_hit(Point(102.0, 102.0), [high, low]) is high


def test_topmost_hit_equal_z_returns_first_in_input_order() -> None:
    first = Piece("first", Point(10.0, 10.0), "#f00", 3)
    second = Piece("second", Point(12.0, 12.0), "#0f0", 3)
    assert topmost_hit(Point(11.0, 11.0), [first, second]) is first
    assert topmost_hit(Point(11.0, 11.0), [second, first]) is second


def test_topmost_hit_skips_pieces_not_under_point() -> None:
    low = Piece("low", Point(100.0, 100.0), "#f00", 1)
    high = Piece("high", Point(300.0, 300.0), "#0f0", 9)
    assert topmost_hit(Point(110.0, 100.0), [low, high]) is low
    assert topmost_hit(Point(500.0, 500.0), [low, high]) is None
    assert topmost_hit(Point(0.0, 0.0), []) is None


def test_z_sorts_are_stable() -> None:
    a = Piece("a", Point(0, 0), "#000", 2)
    b = Piece("b", Point(0, 0), "#000", 1)
    c = Piece("c", Point(0, 0), "#000", 2)
    d = Piece("d", Point(0, 0), "#000", 1)
    assert [p.id for p in by_z_ascending([a, b, c, d])] == ["b", "d", "a", "c"]
    assert [p.id for p in by_z_descending([a, b, c, d])] == ["a", "c", "b", "d"]
