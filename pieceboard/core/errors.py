"""Board domain exceptions."""

from __future__ import annotations


class PieceBoardError(Exception):
    """Base error for board domain failures."""


class InvalidStateError(PieceBoardError):
    """Raised when the board is initialized from inconsistent input."""


class NotFoundError(PieceBoardError, LookupError):
    """Raised when a piece id does not resolve in the store."""

    def __init__(self, piece_id: str) -> None:
        super().__init__(f"piece not found: {piece_id!r}")
        self.piece_id = piece_id
