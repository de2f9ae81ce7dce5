"""The Game board: which piece stands where, whose turn it is, and what has been captured so far"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Self

from src.chess.pieces import Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError
from src.core.models import BoardModel

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
NUM_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


def _empty_cells() -> list[Optional[Piece]]:
    return [None] * NUM_SQUARES


@dataclass
class Board:
    """
    Flat list of 64 cells, indexed by `Square.index` (rank * 8 + file). None means the square is empty.

    `flip_display` is only a hint for whoever draws the board (black at the bottom). No rule looks at it.
    """

    cells: list[Optional[Piece]] = field(default_factory=_empty_cells)
    whose_turn: Color = Color.WHITE
    flip_display: bool = False
    white_captured: list[Piece] = field(default_factory=list)
    black_captured: list[Piece] = field(default_factory=list)

    # --- CREATION ---
    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move"""
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def from_fen(cls, fen_str: str, whose_turn: Color = Color.WHITE) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, read from a8 to h8
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.
        """
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise InvalidFENError(
                f"Expected {BOARD_DIMENSIONS[1]} ranks separated by '/', got {len(fen_by_ranks)}: {fen_str!r}"
            )

        cells = _empty_cells()
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - 1 - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 0
            for character in fen_one_rank:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
                    continue
                if file >= BOARD_DIMENSIONS[0]:
                    raise InvalidFENError(
                        f"Rank {rank + 1} describes more than {BOARD_DIMENSIONS[0]} squares: {fen_one_rank!r}"
                    )
                cells[Square(file, rank).index] = Piece.from_fen(character)
                file += 1

            if file != BOARD_DIMENSIONS[0]:
                raise InvalidFENError(
                    f"Rank {rank + 1} does not describe exactly {BOARD_DIMENSIONS[0]} squares: {fen_one_rank!r}"
                )
        return cls(cells=cells, whose_turn=whose_turn)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(BOARD_DIMENSIONS[0]):
            piece = self.piece(Square(file, rank))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    @classmethod
    def from_model(cls, model: BoardModel) -> Self:
        """Define how to construct a Board from the information the Service layer actually has"""
        if model.whose_turn.upper() not in Color.__members__:
            raise InvalidFENError(f"Unknown color to move: {model.whose_turn!r}")

        board = cls.from_fen(model.position, Color[model.whose_turn.upper()])
        board.flip_display = model.flip_display
        board.white_captured = [Piece.from_fen(char) for char in model.white_captured]
        board.black_captured = [Piece.from_fen(char) for char in model.black_captured]
        return board

    def to_model(self) -> BoardModel:
        """Encode back into a format the Service layer uses"""
        return BoardModel(
            position=self.to_fen(),
            whose_turn=self.whose_turn.name.lower(),
            flip_display=self.flip_display,
            white_captured=[piece.to_fen() for piece in self.white_captured],
            black_captured=[piece.to_fen() for piece in self.black_captured],
        )

    # --- QUERIES ---
    def piece(self, square: Square) -> Optional[Piece]:
        return self.cells[square.index]

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """All pieces on the board, a1 first, h8 last"""
        for index, piece in enumerate(self.cells):
            if piece is not None:
                yield Square.from_index(index), piece

    def locate_color(self, color: Color) -> list[Square]:
        return [square for square, piece in self.occupied() if piece.color == color]

    def captured(self, color: Color) -> list[Piece]:
        """Graveyard of the pieces of `color` that were taken off the board, in capture order"""
        return self.white_captured if color == Color.WHITE else self.black_captured

    # --- UPDATES ---
    def place(self, square: Square, piece: Optional[Piece]) -> None:
        """Put a piece on (or with None: clear) a square. No bookkeeping of whatever stood there."""
        self.cells[square.index] = piece

    def capture(self, square: Square) -> None:
        """Take the piece off the square and put it in the graveyard of its own color. Nothing happens on an empty square."""
        piece = self.piece(square)
        if piece is None:
            return
        self.captured(piece.color).append(piece)
        self.place(square, None)

    def relocate(self, from_square: Square, to_square: Square) -> None:
        """
        Update the position on the board: whatever stands on `to_square` gets captured first.

        NOTE: does not check colors, or whether there is anything on `from_square` at all. That is up to the caller.
        """
        self.capture(to_square)
        self.place(to_square, self.piece(from_square))
        self.place(from_square, None)

    def toggle_turn(self) -> None:
        self.whose_turn = self.whose_turn.opponent
