import logging
import re
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from config import get_settings, get_tmdb_client, BaseAppSettings
from database import get_db
from exceptions import TMDBUpstreamError, TMDBUnavailableError
from routes.crud import movie_cache as cache_crud
from services.movies import get_movie_details
from tmdb import TMDBClientInterface

logger = logging.getLogger(__name__)

router = APIRouter()

MOVIE_DETAILS_PATH = re.compile(r"^movie/(\d+)/?$")


@router.get(
    "/tmdb/{path:path}",
    summary="Movie metadata proxy",
    description=(
        "<h3>Forward a read request to TMDB with the server's API key.</h3>"
        "<p>The query string is passed through. Non-2xx upstream answers "
        "are returned with the upstream status and body. Plain movie "
        "detail requests are served from the local cache while it is "
        "fresh.</p>"
    ),
    responses={
        502: {
            "description": "The metadata provider could not be reached.",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Movie metadata provider is unavailable."
                    }
                }
            },
        },
    },
)
async def proxy_tmdb(
        path: str,
        request: Request,
        db: AsyncSession = Depends(get_db),
        tmdb_client: TMDBClientInterface = Depends(get_tmdb_client),
        settings: BaseAppSettings = Depends(get_settings),
) -> Response:
    params = dict(request.query_params)
    params.pop("api_key", None)
    details_match = MOVIE_DETAILS_PATH.match(path)

    try:
        if details_match and not params:
            data = await get_movie_details(
                db,
                tmdb_client,
                int(details_match.group(1)),
                ttl=timedelta(hours=settings.MOVIE_CACHE_TTL_HOURS),
            )
        else:
            data = await tmdb_client.get(path, params)
            if details_match:
                await cache_crud.cache_movie(
                    db, int(details_match.group(1)), data
                )
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
    return JSONResponse(content=data)
