"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from src.core.exceptions import InvalidSquareError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

FILE_LETTERS = "abcdefgh"
RANK_DIGITS = "12345678"


class SquareShade(Enum):
    """Tint of the square. Only of interest to whoever draws the board."""

    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class Square:
    """Zero-based coordinates: Square(0, 0) is a1, Square(7, 7) is h8."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        # Building a square off the board is a bug in the caller, not bad user input
        if not (0 <= self.file < BOARD_DIMENSIONS[0] and 0 <= self.rank < BOARD_DIMENSIONS[1]):
            raise ValueError(f"Square out of bounds: file={self.file}, rank={self.rank}")

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7). The file letter is case-insensitive."""
        if len(sq) != 2:
            raise InvalidSquareError(sq)

        file_char, rank_char = sq[0].lower(), sq[1]
        if file_char not in FILE_LETTERS or rank_char not in RANK_DIGITS:
            raise InvalidSquareError(sq)
        return cls(FILE_LETTERS.index(file_char), RANK_DIGITS.index(rank_char))

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Inverse of `Square.index`"""
        rank, file = divmod(index, BOARD_DIMENSIONS[0])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{FILE_LETTERS[self.file]}{RANK_DIGITS[self.rank]}"

    def __str__(self) -> str:
        return self.to_algebraic()

    @property
    def index(self) -> int:
        """Position of the square in a flat list of cells: a1=0, b1=1, ..., h8=63"""
        return self.rank * BOARD_DIMENSIONS[0] + self.file

    @property
    def shade(self) -> SquareShade:
        return SquareShade.LIGHT if self.rank % 2 == self.file % 2 else SquareShade.DARK

    def shift(self, file_offset: int, rank_offset: int) -> Optional[Square]:
        """
        Translate the square. Returns None when the result would fall off the board.

        Every movement rule goes through here, so this is the only place that clips at the edges.
        """
        file = self.file + file_offset
        rank = self.rank + rank_offset
        if not (0 <= file < BOARD_DIMENSIONS[0] and 0 <= rank < BOARD_DIMENSIONS[1]):
            return None
        return Square(file, rank)
