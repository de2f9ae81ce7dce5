"""
Custom exceptions shared across layers.

Every runtime failure of the domain derives from `GameError`, so a caller (service, API router, test) can catch the whole family at once.
NOTE: none of these subclass ValueError. pydantic validators only wrap ValueError/AssertionError, so these reach the caller as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.chess.pieces import Color
    from src.chess.square import Square


class GameError(Exception):
    """Top-level error for anything that goes wrong while playing on a board."""


class InvalidSquareError(GameError):
    """Text could not be read as a square in algebraic notation."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Cannot interpret {text!r} as a square. Expected a file a-h followed by a rank 1-8.")


class EmptySquareError(GameError):
    """A move or a query was requested for a square without a piece on it."""

    def __init__(self, square: Square) -> None:
        self.square = square
        super().__init__(f"There is no piece on {square.to_algebraic()}.")


class NotYourTurnError(GameError):
    """The piece on the starting square does not belong to the side that has the turn."""

    def __init__(self, expected: Color) -> None:
        self.expected = expected
        super().__init__(f"It is not your turn. Waiting for {expected.name.lower()} to make a move first.")


class IllegalMoveError(GameError):
    """The piece on `from_square` cannot reach `to_square`."""

    def __init__(self, from_square: Square, to_square: Square) -> None:
        self.from_square = from_square
        self.to_square = to_square
        super().__init__(
            f"Move not allowed: {from_square.to_algebraic()} -> {to_square.to_algebraic()}"
        )


class InvalidFENError(GameError):
    """Piece placement (FEN) string is malformed."""


class InvalidRequestError(GameError):
    """Boundary layer received a request it cannot interpret."""


class RepositoryError(GameError):
    """Persistence layer could not find / store the requested record."""
