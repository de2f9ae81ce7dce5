"""Protocol repository (can implement later for SQL Alchemy / simple Excel table etc.)"""

from typing import Protocol
from uuid import UUID

from src.core.models import BoardModel


class BoardRepository(Protocol):
    """Persistence layer orchestration"""

    def get_board(self, board_id: UUID) -> BoardModel | None:
        """Get board by ID, if record exists."""
        ...

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """Store new board and return the stored data + newly created board ID."""
        ...

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Replace the stored state of an existing record."""
        ...

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        """Remove a board's record."""
        ...
