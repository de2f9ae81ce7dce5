"""
Applying moves to a Board.

This is where turn order is enforced: the movement rules (see moves.py) will happily answer for either side,
but only the side that has the turn gets to change the board.
"""

import logging
from typing import Iterable

from src.chess.board import Board
from src.chess.moves import legal_targets
from src.chess.square import Square
from src.core.exceptions import (
    EmptySquareError,
    GameError,
    IllegalMoveError,
    NotYourTurnError,
)

logger = logging.getLogger(__name__)

# (from_square, to_square) in algebraic notation, ex. ("e2", "e4")
MoveText = tuple[str, str]


def apply_move(board: Board, from_square: Square, to_square: Square) -> None:
    """
    Attempt to make a move
    -----

    1. there must be a piece to move
    2. it must be the turn of that piece's color
    3. the target must be one of the squares that piece can reach
    4. update the board (capturing whatever stood on the target square), then pass the turn
    """
    piece = board.piece(from_square)
    if piece is None:
        raise EmptySquareError(from_square)

    if piece.color != board.whose_turn:
        raise NotYourTurnError(board.whose_turn)

    if to_square not in legal_targets(board, from_square):
        raise IllegalMoveError(from_square, to_square)

    board.relocate(from_square, to_square)
    board.toggle_turn()
    logger.debug("%s %s: %s -> %s", piece.color.name.lower(), piece.type.name.lower(), from_square, to_square)


def apply_moves(board: Board, moves: Iterable[MoveText]) -> int:
    """
    Convenience method to apply multiple moves in order (ex. to quickly reach a given position).

    Stops at the first move that fails and raises its error. The moves before it stay on the board (no rollback).
    Returns the number of moves applied.
    """
    applied = 0
    for from_text, to_text in moves:
        try:
            apply_move(board, Square.from_algebraic(from_text), Square.from_algebraic(to_text))
        except GameError:
            logger.warning("stopped after %d move(s): %s -> %s failed", applied, from_text, to_text)
            raise
        applied += 1
    return applied
