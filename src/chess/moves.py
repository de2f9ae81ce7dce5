"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the reachable squares for each piece type.

The rules produce pseudo-legal targets: reachable and not blocked by your own piece.
Nothing here checks whose turn it is, or whether your own king is left in check.
"""

from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square
from src.core.exceptions import EmptySquareError


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def locate_color(self, color: Color) -> list[Square]: ...


Vector = tuple[int, int]

# Offsets are (file, rank) as seen by white: positive rank is "forward".
# For black pawns the offsets get rotated by 180 degrees (see `rotate_for_color()`)
PAWN_PUSH: Vector = (0, 1)
PAWN_DOUBLE_PUSH: Vector = (0, 2)
PAWN_TAKES: list[Vector] = [(-1, 1), (1, 1)]

# zero-based: 2nd rank for white, 7th rank for black
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}

KNIGHT_DELTAS: list[Vector] = [
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
]
DIAGONALS: list[Vector] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
STRAIGHTS: list[Vector] = [(-1, 0), (0, 1), (1, 0), (0, -1)]
# The king steps in the same 8 directions the queen slides along
KING_QUEEN_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS


def rotate_for_color(vector: Vector, color: Color) -> Vector:
    """White's offsets as they are, black's offsets turned around"""
    df, dr = vector
    return (df, dr) if color == Color.WHITE else (-df, -dr)


# --- MOVEMENT RULES ---
def raycasting_targets(square: Square, board: Board, directions: list[Vector]) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.
    """
    player_color = board.piece(square).color

    targets: list[Square] = []
    for df, dr in directions:
        target_square = square.shift(df, dr)
        while target_square is not None:
            piece_found = board.piece(target_square)
            if piece_found is not None:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if piece_found.color != player_color:
                    targets.append(target_square)
                break

            targets.append(target_square)
            target_square = target_square.shift(df, dr)
    return targets


def single_step_targets(square: Square, board: Board, deltas: list[Vector]) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a single step along a direction"""
    player_color = board.piece(square).color

    targets: list[Square] = []
    for df, dr in deltas:
        target_square = square.shift(df, dr)
        if target_square is None:
            continue

        piece_found = board.piece(target_square)
        if piece_found is None or piece_found.color != player_color:
            targets.append(target_square)
    return targets


def pawn_targets(square: Square, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, to an empty square.
    - It can move by two in their first move (so when on their starting rank), again only to an empty square.
    - takes diagonally

    NOTE: the double step does not look at the square it jumps over. A piece standing there does not block it.
    """
    player_color = board.piece(square).color
    targets: list[Square] = []

    pushes: list[Vector] = [PAWN_PUSH]
    if square.rank == PAWN_STARTING_RANK[player_color]:
        pushes.insert(0, PAWN_DOUBLE_PUSH)

    for push in pushes:
        target_square = square.shift(*rotate_for_color(push, player_color))
        if target_square is not None and board.piece(target_square) is None:
            targets.append(target_square)

    # pawns take diagonally, and only when there is something to take
    for take in PAWN_TAKES:
        target_square = square.shift(*rotate_for_color(take, player_color))
        if target_square is None:
            continue
        piece_found = board.piece(target_square)
        if piece_found is not None and piece_found.color != player_color:
            targets.append(target_square)
    return targets


def knight_targets(square: Square, board: Board) -> list[Square]:
    """Knights always move such that |delta_rank| + |delta_file| = 3"""
    return single_step_targets(square, board, KNIGHT_DELTAS)


def bishop_targets(square: Square, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_targets(square, board, DIAGONALS)


def rook_targets(square: Square, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_targets(square, board, STRAIGHTS)


def queen_targets(square: Square, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_targets(square, board, KING_QUEEN_DELTAS)


def king_targets(square: Square, board: Board) -> list[Square]:
    """The king can move by a single square at the time."""
    return single_step_targets(square, board, KING_QUEEN_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
TargetsFn = Callable[[Square, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, TargetsFn] = {
    PieceType.PAWN: pawn_targets,
    PieceType.KNIGHT: knight_targets,
    PieceType.BISHOP: bishop_targets,
    PieceType.ROOK: rook_targets,
    PieceType.QUEEN: queen_targets,
    PieceType.KING: king_targets,
}


def legal_targets(board: Board, square: Square) -> list[Square]:
    """Squares the piece on `square` can move to. Raises EmptySquareError when there is no piece to move."""
    piece = board.piece(square)
    if piece is None:
        raise EmptySquareError(square)
    movement_rule: TargetsFn = MOVEMENT_RULES[piece.type]
    return movement_rule(square, board)


def targets_by_square(board: Board, color: Color) -> dict[Square, list[Square]]:
    """All pieces of one color that can move somewhere, with their target squares (a1 first, h8 last)."""
    reachable: dict[Square, list[Square]] = {}
    for square in board.locate_color(color):
        targets = legal_targets(board, square)
        if targets:
            reachable[square] = targets
    return reachable
