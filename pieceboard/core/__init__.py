"""Board domain primitives."""

from pieceboard.core.errors import InvalidStateError, NotFoundError, PieceBoardError
from pieceboard.core.geometry import PIECE_RADIUS, distance_squared, is_hit, topmost_hit
from pieceboard.core.models import Piece, Point, default_pieces
from pieceboard.core.piece_store import PieceStore

__all__ = [
    "InvalidStateError",
    "NotFoundError",
    "PIECE_RADIUS",
    "Piece",
    "PieceBoardError",
    "PieceStore",
    "Point",
    "default_pieces",
    "distance_squared",
    "is_hit",
    "topmost_hit",
]
