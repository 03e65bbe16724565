from datetime import datetime, timedelta, UTC

import pytest
from assertpy import assert_that  # type: ignore
from sqlalchemy import select

from celery_.tasks import purge_stale_movie_cache, remove_expired_refresh_tokens
from database import (
    reset_sync_sqlite_database,
    get_sync_db_contextmanager,
    MovieCacheModel,
    RefreshTokenModel,
    UserModel,
)


@pytest.fixture(scope="function", autouse=True)
def reset_db():
    """
    Recreate the tables of the synchronous engine the celery tasks use.
    """
    reset_sync_sqlite_database()
    yield


@pytest.fixture(scope="function")
def sync_db():
    with get_sync_db_contextmanager() as session:
        yield session


def test_purge_stale_movie_cache(sync_db):
    now = datetime.now(UTC)
    sync_db.add_all([
        MovieCacheModel(tmdb_id=1, data={"id": 1}, last_updated=now - timedelta(days=2)),
        MovieCacheModel(tmdb_id=2, data={"id": 2}, last_updated=now),
    ])
    sync_db.commit()

    removed = purge_stale_movie_cache()

    assert_that(removed, "Unexpected number of purged entries").is_equal_to(1)
    sync_db.expire_all()
    remaining = sync_db.execute(select(MovieCacheModel.tmdb_id)).scalars().all()
    assert_that(remaining, "Fresh entry must survive").is_equal_to([2])


def test_remove_expired_refresh_tokens(sync_db):
    user = UserModel.create(
        username="sleeper",
        email="sleeper@example.com",
        raw_password="StrongPassword123!",
    )
    sync_db.add(user)
    sync_db.commit()
    sync_db.add_all([
        RefreshTokenModel.create(user_id=user.id, days_valid=-1, token="expired"),
        RefreshTokenModel.create(user_id=user.id, days_valid=7, token="valid"),
    ])
    sync_db.commit()

    removed = remove_expired_refresh_tokens()

    assert_that(removed, "Unexpected number of removed tokens").is_equal_to(1)
    remaining = sync_db.execute(select(RefreshTokenModel.token)).scalars().all()
    assert_that(remaining).is_equal_to(["valid"])
