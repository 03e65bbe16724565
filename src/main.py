import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import get_settings
from routes import (
    accounts_router,
    users_router,
    watchlist_router,
    favorites_router,
    diary_router,
    follows_router,
    lists_router,
    tmdb_router,
    recommendations_router,
)

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="CineShelf",
    description="Personal movie tracking: watchlist, favorites, diary, "
                "follows, custom lists and recommendations."
)

origins = [
    "http://localhost:3000",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
        request: Request, exc: RequestValidationError
):
    messages = []
    for error in exc.errors():
        field = ".".join(
            str(part) for part in error["loc"] if part != "body"
        )
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "; ".join(messages)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


api_prefix = "/api"

app.include_router(accounts_router, prefix=api_prefix, tags=["accounts"])
app.include_router(users_router, prefix=api_prefix, tags=["users"])
app.include_router(watchlist_router, prefix=api_prefix, tags=["watchlist"])
app.include_router(favorites_router, prefix=api_prefix, tags=["favorites"])
app.include_router(diary_router, prefix=api_prefix, tags=["diary"])
app.include_router(follows_router, prefix=api_prefix, tags=["follows"])
app.include_router(lists_router, prefix=api_prefix, tags=["lists"])
app.include_router(tmdb_router, prefix=api_prefix, tags=["tmdb"])
app.include_router(recommendations_router, prefix=api_prefix, tags=["recommendations"])
