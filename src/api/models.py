"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.square import Square
from src.core.exceptions import InvalidRequestError, InvalidSquareError
from src.core.shared_types import BoardLayout, Color, PieceType


def _validate_square_name(value: str) -> str:
    """Must read as a square in algebraic notation. Returned as given (the domain parses case-insensitively)."""
    try:
        Square.from_algebraic(value)
    except InvalidSquareError as e:
        raise InvalidRequestError(f"Cannot interpret {value!r} as a valid square name.") from e
    return value


# --- REQUEST MODELS ---
class CreateBoardRequest(BaseModel):
    layout: BoardLayout = BoardLayout.STANDARD
    flip_display: bool = False


class GetBoardRequest(BaseModel):
    board_id: UUID


class DeleteBoardRequest(BaseModel):
    board_id: UUID


class LegalTargetsRequest(BaseModel):
    board_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class MoveRequest(BaseModel):
    board_id: UUID
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class MoveSequenceRequest(BaseModel):
    """Moves are applied in the given order. The first one that fails stops the sequence."""

    board_id: UUID
    moves: list[tuple[str, str]]

    @field_validator("moves")
    @classmethod
    def validate_moves(cls, value: list[tuple[str, str]]) -> list[tuple[str, str]]:
        for from_square, to_square in value:
            _validate_square_name(from_square)
            _validate_square_name(to_square)
        return value


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    piece_type: PieceType
    color: Color
    glyph: str


class CellView(BaseModel):
    """An occupied square. `index` is rank * 8 + file (a1=0, h8=63)"""

    index: int
    square: str
    piece: PieceView


class BoardResponse(BaseModel):
    """Everything needed to draw the board, without reaching into the domain layer."""

    board_id: UUID
    cells: list[CellView]
    whose_turn: Color
    flip_display: bool
    white_captured: list[PieceView]
    black_captured: list[PieceView]


class LegalTargetsResponse(BaseModel):
    board_id: UUID
    square: str
    targets: list[str]
