"""Single-owner piece collection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pieceboard.core.errors import InvalidStateError, NotFoundError
from pieceboard.core.geometry import by_z_ascending, by_z_descending
from pieceboard.core.models import Piece, Point


class PieceStore:
    """Ordered pieces keyed by id, mutated only through position updates."""

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._pieces: dict[str, Piece] = {}
        for piece in pieces:
            if piece.id in self._pieces:
                raise InvalidStateError(f"duplicate piece id: {piece.id!r}")
            self._pieces[piece.id] = piece
        self._revision = 0

    @classmethod
    def initialize(cls, pieces: Iterable[Piece]) -> PieceStore:
        """Build a store, rejecting duplicate ids."""
        return cls(pieces)

    def get(self, piece_id: str) -> Piece | None:
        return self._pieces.get(piece_id)

    def update_position(self, piece_id: str, new_position: Point) -> Piece:
        """Move one piece and return its replacement record."""
        current = self._pieces.get(piece_id)
        if current is None:
            raise NotFoundError(piece_id)
        # dict assignment to an existing key keeps insertion order.
        updated = current.moved_to(new_position)
        self._pieces[piece_id] = updated
        self._revision += 1
        return updated

    def pieces(self) -> tuple[Piece, ...]:
        """Return pieces in insertion order."""
        return tuple(self._pieces.values())

    def sorted_by_z_ascending(self) -> list[Piece]:
        return by_z_ascending(self._pieces.values())

    def sorted_by_z_descending(self) -> list[Piece]:
        return by_z_descending(self._pieces.values())

    def revision(self) -> int:
        return self._revision

    def __len__(self) -> int:
        return len(self._pieces)

    def __contains__(self, piece_id: object) -> bool:
        return piece_id in self._pieces

    def __iter__(self) -> Iterator[Piece]:
        return iter(tuple(self._pieces.values()))
