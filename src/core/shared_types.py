"""
Type definitions used across layers
"""

from enum import StrEnum


class BoardLayout(StrEnum):
    STANDARD = "standard"
    EMPTY = "empty"


# --- Boundary versions of Color and PieceType. The domain has its own (see src/chess/pieces.py)
# --- NOTE Same names on purpose: reads clearly, and the imports show which version is used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
