import os

os.environ["ENVIRONMENT"] = "testing"

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from config import get_settings, get_tmdb_client
from database import reset_database, get_db_contextmanager
from main import app
from security.interfaces import JWTAuthManagerInterface
from security.token_manager import JWTAuthManager
from tests.doubles.stubs.tmdb import StubTMDBClient


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )


@pytest_asyncio.fixture(scope="function", autouse=True)
async def reset_db():
    """
    Reset the in-memory SQLite database before each test function.
    """
    await reset_database()
    yield


@pytest_asyncio.fixture(scope="function")
async def settings():
    """
    Provide application settings.
    """
    return get_settings()


@pytest_asyncio.fixture(scope="function")
async def tmdb_stub():
    """
    Provide a stub implementation of the movie metadata client.

    Tests register canned responses on it before calling the API.
    """
    return StubTMDBClient()


@pytest_asyncio.fixture(scope="function")
async def client(tmdb_stub):
    """
    Provide an asynchronous HTTP client for testing.

    Overrides the metadata client dependency with the stub.
    """
    app.dependency_overrides[get_tmdb_client] = lambda: tmdb_stub

    async with AsyncClient(transport=ASGITransport(app=app),
                           base_url="http://test") as async_client:
        yield async_client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """
    Provide an async database session for database interactions.

    This fixture yields an async session using `get_db_contextmanager`, ensuring that the session
    is properly closed after each test.
    """
    async with get_db_contextmanager() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def jwt_manager() -> JWTAuthManagerInterface:
    """
    Create a JWT authentication manager configured like the application one.
    """
    settings = get_settings()
    return JWTAuthManager(
        secret_key_access=settings.SECRET_KEY_ACCESS,
        secret_key_refresh=settings.SECRET_KEY_REFRESH,
        algorithm=settings.JWT_SIGNING_ALGORITHM,
        access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        refresh_token_expire_days=settings.LOGIN_TIME_DAYS,
    )


@pytest_asyncio.fixture
async def register_user(client):
    """
    Factory registering a user through the API.

    Returns a function that accepts a registration payload and returns the
    created user as returned by the API.
    """

    async def _register(
            registration_payload: dict | None = None
    ) -> dict:
        payload = registration_payload or {
            "username": "testuser",
            "email": "testuser@example.com",
            "password": "StrongPassword123!",
        }
        response = await client.post("/api/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest_asyncio.fixture
async def create_login_user(client, register_user):
    """
    Register a user and log them in.

    :returns: dict {
        user: dict,
        access_token: str,
        refresh_token: str,
        headers: dict,
        payload: dict {username: str, email: str, password: str}
    }
    """

    async def _login_user(username: str = "user"):
        payload = {
            "username": username,
            "email": f"{username}@example.com",
            "password": "StrongPassword123!",
        }
        user = await register_user(payload)

        login_response = await client.post(
            "/api/login",
            json={"username": username, "password": payload["password"]},
        )
        assert login_response.status_code == 201, "Expected status code 201 for successful login."

        data = login_response.json()
        return {
            "user": user,
            "access_token": data["accessToken"],
            "refresh_token": data["refreshToken"],
            "headers": {"Authorization": f"Bearer {data['accessToken']}"},
            "payload": payload,
        }

    return _login_user
