"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

# Type aliases to make BoardModel easier to read
PieceColor = str
FENCharacter = str


@dataclass
class BoardModel:
    """Transport-safe representation of a board used between API, Service, DB, and the domain layer.

    * position: piece placement part of a FEN string (ex. "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
    * graveyards store the captured pieces as FEN characters, in capture order
    """

    position: str
    whose_turn: PieceColor
    flip_display: bool = False
    white_captured: list[FENCharacter] = field(default_factory=list)
    black_captured: list[FENCharacter] = field(default_factory=list)
