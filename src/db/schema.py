"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBBoard(Base):
    __tablename__ = "boards"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    position: Mapped[str]
    whose_turn: Mapped[str]
    flip_display: Mapped[bool] = mapped_column(default=False)
    white_captured: Mapped[list[str]] = mapped_column(JSON, default=list)
    black_captured: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
