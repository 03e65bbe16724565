from datetime import datetime, UTC

from sqlalchemy import Integer, JSON, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from database.models.base import Base


class MovieCacheModel(Base):
    """
    Copy of provider metadata for one movie, keyed by its TMDB id.

    Rows older than MOVIE_CACHE_TTL_HOURS are ignored on read and purged by
    the periodic celery task.
    """

    __tablename__ = "movie_cache"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    tmdb_id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        index=True
    )

    def __repr__(self):
        return f"<MovieCacheModel(tmdb_id={self.tmdb_id}, last_updated={self.last_updated})>"
