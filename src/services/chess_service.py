"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    BoardResponse,
    CellView,
    CreateBoardRequest,
    DeleteBoardRequest,
    GetBoardRequest,
    LegalTargetsRequest,
    LegalTargetsResponse,
    MoveRequest,
    MoveSequenceRequest,
    PieceView,
)
from src.chess.board import Board
from src.chess.game import apply_move, apply_moves
from src.chess.moves import legal_targets
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import GameError, RepositoryError
from src.core.models import BoardModel
from src.core.shared_types import BoardLayout, Color, PieceType
from src.db.repository import BoardRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for a chess board."""

    def __init__(self, repository: BoardRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_board(self, request: CreateBoardRequest) -> BoardResponse:
        """Set up a fresh board (standard starting position, or empty)."""
        board = Board.new_game() if request.layout == BoardLayout.STANDARD else Board.empty()
        board.flip_display = request.flip_display

        stored_board, board_id = self.repo.create_board(board.to_model())
        logger.info("created %s board %s", request.layout, board_id)
        return self._create_board_response(board_id, stored_board)

    def get_board(self, request: GetBoardRequest) -> BoardResponse:
        """
        Retrieve current board state.
        ----
        Used in "polling" loop by frontend to redraw the board for instance.
        """
        board_model = self._fetch_board(request.board_id)
        return self._create_board_response(request.board_id, board_model)

    def legal_targets(self, request: LegalTargetsRequest) -> LegalTargetsResponse:
        """Squares the piece on the requested square can move to. Does not care whose turn it is."""
        board = Board.from_model(self._fetch_board(request.board_id))
        targets = legal_targets(board, Square.from_algebraic(request.square))
        return LegalTargetsResponse(
            board_id=request.board_id,
            square=request.square,
            targets=[target.to_algebraic() for target in targets],
        )

    def make_move(self, request: MoveRequest) -> BoardResponse:
        """Make a move attempt. Nothing gets stored if the move is rejected."""
        board = Board.from_model(self._fetch_board(request.board_id))

        apply_move(
            board,
            Square.from_algebraic(request.from_square),
            Square.from_algebraic(request.to_square),
        )

        after_move = board.to_model()
        self.repo.update_board(request.board_id, after_move)
        return self._create_board_response(request.board_id, after_move)

    def make_moves(self, request: MoveSequenceRequest) -> BoardResponse:
        """
        Make a sequence of moves.
        ----
        When a move fails, the moves before it are kept: that state gets stored before the error is passed on.
        """
        board = Board.from_model(self._fetch_board(request.board_id))
        try:
            apply_moves(board, request.moves)
        except GameError:
            self.repo.update_board(request.board_id, board.to_model())
            raise

        after_moves = board.to_model()
        self.repo.update_board(request.board_id, after_moves)
        return self._create_board_response(request.board_id, after_moves)

    def delete_board(self, request: DeleteBoardRequest) -> None:
        """Handle a request to delete a Board record."""
        self.repo.delete_board(request.board_id)
        logger.info("deleted board %s", request.board_id)

    # -- Internal helpers --
    def _create_board_response(self, board_id: UUID, model: BoardModel) -> BoardResponse:
        """Convert info in BoardModel to a BoardResponse (for board with given ID.)"""
        board = Board.from_model(model)
        return BoardResponse(
            board_id=board_id,
            cells=[
                CellView(index=square.index, square=square.to_algebraic(), piece=_piece_view(piece))
                for square, piece in board.occupied()
            ],
            whose_turn=Color[board.whose_turn.name],
            flip_display=board.flip_display,
            white_captured=[_piece_view(piece) for piece in board.white_captured],
            black_captured=[_piece_view(piece) for piece in board.black_captured],
        )

    def _fetch_board(self, board_id: UUID) -> BoardModel:
        """Attempt to find the board in the repository and raise error if it fails."""
        board_model = self.repo.get_board(board_id)
        if board_model is None:
            raise RepositoryError(f"Board with {board_id=} not found.")
        return board_model


def _piece_view(piece: Piece) -> PieceView:
    return PieceView(
        piece_type=PieceType[piece.type.name],
        color=Color[piece.color.name],
        glyph=piece.glyph,
    )
