from celery_.tasks import app
from celery.schedules import crontab

app.conf.beat_schedule = {
    "purge_movie_cache_every_day_at_01_01": {
        'task': "celery_.tasks.purge_stale_movie_cache",
        'schedule': crontab(minute=1, hour=1),
    },
    "remove_refresh_tokens_every_day_at_01_31": {
        'task': "celery_.tasks.remove_expired_refresh_tokens",
        'schedule': crontab(minute=31, hour=1),
    },
}
