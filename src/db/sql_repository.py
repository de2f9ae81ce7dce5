"""Implementation of (Board)Repository using SQLAlchemy"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import BoardModel
from src.db.schema import DBBoard

logger = logging.getLogger(__name__)


class SQLBoardRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_board(self, board_id: UUID) -> BoardModel | None:
        """Get board by ID, if record exists."""
        board_db = self._fetch_board(board_id)
        if board_db:
            return self._to_model(board_db)
        return None

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """Store new board and return the stored data + newly created board ID."""

        new_id = uuid4()
        board_db = DBBoard(
            id=new_id,
            position=board.position,
            whose_turn=board.whose_turn,
            flip_display=board.flip_display,
            white_captured=list(board.white_captured),
            black_captured=list(board.black_captured),
        )
        self.db.add(board_db)
        self.db.commit()
        self.db.refresh(board_db)
        logger.debug("stored new board %s", new_id)
        return self._to_model(board_db), new_id

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Replace the stored state of an existing record."""
        board_db = self._fetch_board(board_id)
        if not board_db:
            return None
        board_db.position = board.position
        board_db.whose_turn = board.whose_turn
        board_db.flip_display = board.flip_display
        # assign new lists: JSON columns do not track in-place mutation
        board_db.white_captured = list(board.white_captured)
        board_db.black_captured = list(board.black_captured)
        self.db.commit()
        self.db.refresh(board_db)
        return self._to_model(board_db)

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        """Remove a board's record."""
        board_db = self._fetch_board(board_id)
        if not board_db:
            return None
        board_model = self._to_model(board_db)
        self.db.delete(board_db)
        self.db.commit()
        logger.debug("deleted board %s", board_id)
        return board_model

    def _fetch_board(self, board_id: UUID) -> DBBoard | None:
        query = select(DBBoard).where(DBBoard.id == board_id)
        return self.db.scalar(query)

    def _to_model(self, board_db: DBBoard) -> BoardModel:
        """Convert SQLAlchemy model to data transfer model."""
        return BoardModel(
            position=board_db.position,
            whose_turn=board_db.whose_turn,
            flip_display=board_db.flip_display,
            white_captured=list(board_db.white_captured),
            black_captured=list(board_db.black_captured),
        )
