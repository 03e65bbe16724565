import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from config import get_settings, get_tmdb_client, BaseAppSettings
from database import get_db
from exceptions import TMDBError, TMDBUpstreamError, TMDBUnavailableError
from routes.crud import favorites as favorites_crud
from routes.utils import get_required_access_token_payload
from schemas import AccessTokenPayload, RecommendationsResponseSchema
from services.movies import get_movie_details
from services.recommendations import extract_genre_ids, rank_by_genre_overlap
from tmdb import TMDBClientInterface

logger = logging.getLogger(__name__)

router = APIRouter()

TRENDING_PATH = "trending/movie/week"


@router.get(
    "/recommendations/for-you",
    response_model=RecommendationsResponseSchema,
    summary="For You",
    description=(
        "<h3>Trending movies ordered by genre overlap with the user's "
        "favorites.</h3>"
        "<p>Without favorites the trending order is kept.</p>"
    ),
)
async def get_for_you(
        token_payload: AccessTokenPayload = Depends(
            get_required_access_token_payload),
        db: AsyncSession = Depends(get_db),
        tmdb_client: TMDBClientInterface = Depends(get_tmdb_client),
        settings: BaseAppSettings = Depends(get_settings),
):
    ttl = timedelta(hours=settings.MOVIE_CACHE_TTL_HOURS)
    favorites = await favorites_crud.get_favorites_by_user(
        db, token_payload["user_id"]
    )

    genre_ids: set[int] = set()
    for favorite in favorites:
        try:
            details = await get_movie_details(
                db, tmdb_client, favorite.movie_id, ttl
            )
        except TMDBError as e:
            logger.warning(
                f"Skipping favorite {favorite.movie_id} for recommendations: {e}"
            )
            continue
        genre_ids |= extract_genre_ids(details)

    try:
        trending = await tmdb_client.get(TRENDING_PATH)
    except TMDBUpstreamError as e:
        return Response(
            content=e.body,
            status_code=e.status_code,
            media_type="text/plain",
        )
    except TMDBUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e)
        )

    return RecommendationsResponseSchema(
        results=rank_by_genre_overlap(trending.get("results", []), genre_ids)
    )
