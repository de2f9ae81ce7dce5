"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.chess.board import Board
from src.chess.pieces import PIECE_TO_FEN, Color, PieceType
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def board_with_pieces() -> Callable[..., Board]:
    """Call the inner function with {"d4": (PieceType.ROOK, Color.WHITE), ...} to get a board with only those pieces"""

    def _create_board(
        pieces: dict[str, tuple[PieceType, Color]],
        whose_turn: Color = Color.WHITE,
    ) -> Board:
        fen_rows = [["."] * 8 for _ in range(8)]
        for square_name, (piece_type, color) in pieces.items():
            fen_char = PIECE_TO_FEN[piece_type]
            fen_char = fen_char.upper() if color == Color.WHITE else fen_char
            file_idx = ord(square_name[0]) - ord("a")
            rank_idx = 8 - int(square_name[1])
            fen_rows[rank_idx][file_idx] = fen_char

        # replace runs of '.' by the number of empty squares
        fen = "/".join("".join(row) for row in fen_rows)
        for count in range(8, 0, -1):
            fen = fen.replace("." * count, str(count))
        return Board.from_fen(fen, whose_turn)

    return _create_board
