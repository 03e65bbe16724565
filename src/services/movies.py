import logging
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from routes.crud import movie_cache as cache_crud
from tmdb import TMDBClientInterface

logger = logging.getLogger(__name__)


async def get_movie_details(
        db: AsyncSession,
        tmdb_client: TMDBClientInterface,
        tmdb_id: int,
        ttl: timedelta,
) -> dict:
    """
    Movie details, served from the cache while fresh.

    Raises:
        TMDBUpstreamError, TMDBUnavailableError: on a cache miss the
            provider could not deliver the movie.
    """
    cached = await cache_crud.get_cached_movie(db, tmdb_id, max_age=ttl)
    if cached is not None:
        logger.debug(f"Movie cache hit for {tmdb_id}")
        return cached.data

    logger.debug(f"Movie cache miss for {tmdb_id}")
    data = await tmdb_client.get(f"movie/{tmdb_id}")
    await cache_crud.cache_movie(db, tmdb_id, data)
    return data
