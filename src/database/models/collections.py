from datetime import datetime, UTC
from typing import Optional

from sqlalchemy import (
    Integer, Text, Boolean, DateTime, ForeignKey, UniqueConstraint,
    CheckConstraint
)
from sqlalchemy.orm import Mapped, mapped_column

from database.models.base import Base


class WatchlistModel(Base):
    __tablename__ = "watchlist"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "movie_id", name="uq_watchlist_user_movie"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False
    )

    def __repr__(self):
        return f"<WatchlistModel(id={self.id}, user_id={self.user_id}, movie_id={self.movie_id})>"


class FavoriteModel(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "movie_id", name="uq_favorites_user_movie"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False
    )

    def __repr__(self):
        return f"<FavoriteModel(id={self.id}, user_id={self.user_id}, movie_id={self.movie_id})>"


class DiaryEntryModel(Base):
    """A single watch event. Re-watches produce several rows per movie."""

    __tablename__ = "diary"
    __table_args__ = (
        CheckConstraint(
            "rating IS NULL OR (rating >= 1 AND rating <= 5)",
            name="check_diary_rating_range"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False)
    watched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False
    )
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    review: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    liked: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    def __repr__(self):
        return f"<DiaryEntryModel(id={self.id}, user_id={self.user_id}, movie_id={self.movie_id}, rating={self.rating})>"
