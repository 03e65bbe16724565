import logging
from datetime import timedelta

from celery import Celery

from config import get_settings
from database import get_sync_db_contextmanager
from routes.crud.movie_cache import purge_stale_movies
from routes.crud.tokens import remove_expired_refresh_tokens as delete_expired_refresh_tokens

logger = logging.getLogger(__name__)

settings = get_settings()

app = Celery("cineshelf")
app.autodiscover_tasks()
app.conf.broker_url = settings.CELERY_BROKER_URL
app.conf.result_backend = settings.CELERY_RESULT_BACKEND
app.conf.timezone = "UTC"


@app.task()
def purge_stale_movie_cache() -> int:
    logger.info("purge_stale_movie_cache starts")
    with get_sync_db_contextmanager() as db:
        removed = purge_stale_movies(
            db, timedelta(hours=settings.MOVIE_CACHE_TTL_HOURS)
        )
    logger.info(f"Removed {removed} stale movie cache entries")
    return removed


@app.task()
def remove_expired_refresh_tokens() -> int:
    logger.info("remove_expired_refresh_tokens starts")
    with get_sync_db_contextmanager() as db:
        removed = delete_expired_refresh_tokens(db)
    logger.info(f"Removed {removed} expired refresh tokens")
    return removed
