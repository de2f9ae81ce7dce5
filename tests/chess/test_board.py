"""Unit tests for /src/chess/board.py"""

from typing import Callable

import pytest

from src.chess.board import STARTING_POSITION_FEN, Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square
from src.core.exceptions import InvalidFENError
from src.core.models import BoardModel

EMPTY_FEN = "/".join(["8"] * 8)
BACK_RANK: list[PieceType] = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Standard opening position, white to move, nothing captured yet"""
    board = Board.new_game()

    for file, piece_type in enumerate(BACK_RANK):
        assert board.piece(Square(file, 0)) == Piece(piece_type, Color.WHITE)
        assert board.piece(Square(file, 1)) == Piece(PieceType.PAWN, Color.WHITE)
        assert board.piece(Square(file, 6)) == Piece(PieceType.PAWN, Color.BLACK)
        assert board.piece(Square(file, 7)) == Piece(piece_type, Color.BLACK)

    # 3rd through 6th ranks all empty
    for rank in range(2, 6):
        for file in range(8):
            assert board.piece(Square(file, rank)) is None

    assert board.whose_turn == Color.WHITE
    assert board.white_captured == []
    assert board.black_captured == []
    assert len(board.locate_color(Color.WHITE)) == 16
    assert len(board.locate_color(Color.BLACK)) == 16


def test_starting_position_cell_indices() -> None:
    """Flat list of cells uses index rank * 8 + file"""
    board = Board.new_game()
    assert board.cells[0] == Piece(PieceType.ROOK, Color.WHITE)
    assert board.cells[4] == Piece(PieceType.KING, Color.WHITE)
    assert board.cells[12] == Piece(PieceType.PAWN, Color.WHITE)
    assert board.cells[59] == Piece(PieceType.QUEEN, Color.BLACK)
    assert board.cells[60] == Piece(PieceType.KING, Color.BLACK)
    assert all(cell is None for cell in board.cells[16:48])


def test_creating_empty_board() -> None:
    board = Board.empty()
    assert len(board.cells) == 64
    assert all(cell is None for cell in board.cells)
    assert board.whose_turn == Color.WHITE
    assert board.flip_display is False
    assert list(board.occupied()) == []


def test_creating_board_after_e4() -> None:
    """Say, white moves the pawn from e2 to e4, and I want to load up the board in this position"""
    board = Board.from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR", Color.BLACK)
    assert board.piece(sq("e4")) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.piece(sq("e2")) is None
    assert board.whose_turn == Color.BLACK


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION_FEN,
        EMPTY_FEN,
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        "2kr1b1r/p1p1pppp/2p2n2/3q2B1/6Q1/2NP4/PPP2PPP/R4RK1",
    ],
)
def test_fen_round_trip(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


@pytest.mark.parametrize(
    "fen",
    [
        "8/8/8/8/8/8/8",  # 7 ranks
        "8/8/8/8/8/8/8/8/8",  # 9 ranks
        "9/8/8/8/8/8/8/8",  # too many empty squares
        "7/8/8/8/8/8/8/8",  # too few squares
        "rnbqkbnrp/8/8/8/8/8/8/8",  # 9 pieces on a rank
        "x7/8/8/8/8/8/8/8",  # not a piece
    ],
)
def test_invalid_fen(fen: str) -> None:
    with pytest.raises(InvalidFENError):
        Board.from_fen(fen)


# -- QUERIES ---
def test_occupied_in_index_order() -> None:
    board = Board.from_fen("4k3/8/8/8/8/8/8/R3K3")
    assert [(square.to_algebraic(), piece.to_fen()) for square, piece in board.occupied()] == [
        ("a1", "R"),
        ("e1", "K"),
        ("e8", "k"),
    ]
    assert board.locate_color(Color.WHITE) == [sq("a1"), sq("e1")]
    assert board.locate_color(Color.BLACK) == [sq("e8")]


# -- UPDATES ---
def test_place_and_clear_square() -> None:
    board = Board.empty()
    knight = Piece(PieceType.KNIGHT, Color.BLACK)
    board.place(sq("c6"), knight)
    assert board.piece(sq("c6")) == knight
    assert board.cells[42] == knight

    board.place(sq("c6"), None)
    assert board.piece(sq("c6")) is None


@pytest.mark.parametrize("color", list(Color))
def test_capture_goes_to_graveyard_of_captured_color(
    color: Color, board_with_pieces: Callable[..., Board]
) -> None:
    """The captured piece ends up in the list of its OWN color, not the color of whoever took it"""
    board = board_with_pieces({"d4": (PieceType.ROOK, color)})
    board.capture(sq("d4"))

    assert board.piece(sq("d4")) is None
    assert board.captured(color) == [Piece(PieceType.ROOK, color)]
    assert board.captured(color.opponent) == []


def test_capture_on_empty_square_is_a_no_op() -> None:
    board = Board.new_game()
    board.capture(sq("e4"))
    assert board.to_fen() == STARTING_POSITION_FEN
    assert board.white_captured == []
    assert board.black_captured == []


def test_capture_order_is_kept() -> None:
    board = Board.new_game()
    board.capture(sq("d8"))
    board.capture(sq("a7"))
    board.capture(sq("h8"))
    assert board.black_captured == [
        Piece(PieceType.QUEEN, Color.BLACK),
        Piece(PieceType.PAWN, Color.BLACK),
        Piece(PieceType.ROOK, Color.BLACK),
    ]
    assert board.white_captured == []


def test_relocate_to_empty_square() -> None:
    board = Board.new_game()
    board.relocate(sq("g1"), sq("f3"))
    assert board.piece(sq("g1")) is None
    assert board.piece(sq("f3")) == Piece(PieceType.KNIGHT, Color.WHITE)
    assert board.white_captured == []
    assert board.black_captured == []


def test_relocate_captures_first() -> None:
    board = Board.new_game()
    board.relocate(sq("d1"), sq("d7"))
    assert board.piece(sq("d1")) is None
    assert board.piece(sq("d7")) == Piece(PieceType.QUEEN, Color.WHITE)
    assert board.black_captured == [Piece(PieceType.PAWN, Color.BLACK)]


def test_relocate_does_not_check_colors() -> None:
    """Not this primitive's job: it will take your own piece if asked to"""
    board = Board.new_game()
    board.relocate(sq("a1"), sq("a2"))
    assert board.piece(sq("a2")) == Piece(PieceType.ROOK, Color.WHITE)
    assert board.white_captured == [Piece(PieceType.PAWN, Color.WHITE)]


def test_relocate_does_not_touch_turn() -> None:
    board = Board.new_game()
    board.relocate(sq("e2"), sq("e4"))
    assert board.whose_turn == Color.WHITE


def test_toggle_turn() -> None:
    board = Board.empty()
    board.toggle_turn()
    assert board.whose_turn == Color.BLACK
    board.toggle_turn()
    assert board.whose_turn == Color.WHITE


# -- TRANSPORT MODEL ---
def test_to_model() -> None:
    board = Board.new_game()
    board.relocate(sq("d1"), sq("d7"))
    board.relocate(sq("e8"), sq("d7"))
    board.toggle_turn()
    board.flip_display = True

    model = board.to_model()
    assert model == BoardModel(
        position="rnbq1bnr/pppkpppp/8/8/8/8/PPPPPPPP/RNB1KBNR",
        whose_turn="black",
        flip_display=True,
        white_captured=["Q"],
        black_captured=["p"],
    )


def test_from_model_restores_board() -> None:
    board = Board.new_game()
    board.relocate(sq("b1"), sq("c3"))
    board.relocate(sq("c3"), sq("d5"))
    board.relocate(sq("d5"), sq("c7"))
    board.toggle_turn()

    restored = Board.from_model(board.to_model())
    assert restored == board


def test_from_model_with_unknown_color() -> None:
    model = BoardModel(position=EMPTY_FEN, whose_turn="purple")
    with pytest.raises(InvalidFENError):
        Board.from_model(model)
