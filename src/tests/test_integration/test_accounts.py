import pytest
from sqlalchemy import select

from database import RefreshTokenModel, UserModel
from routes.crud import users as users_crud


@pytest.mark.asyncio
async def test_register_user_success(client, db_session):
    payload = {
        "username": "cinephile",
        "email": "Cinephile@Example.com",
        "password": "StrongPassword123!",
    }

    response = await client.post("/api/register", json=payload)

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["username"] == "cinephile"
    assert data["email"] == "cinephile@example.com"
    assert "password" not in data
    assert "hashedPassword" not in data

    result = await db_session.execute(
        select(UserModel).where(UserModel.username == "cinephile")
    )
    user = result.scalars().first()
    assert user is not None
    assert user.verify_password("StrongPassword123!")


@pytest.mark.parametrize(
    "field, value",
    [("username", "cinephile"), ("email", "cinephile@example.com")],
)
@pytest.mark.asyncio
async def test_register_duplicate_identity_conflict(client, register_user, field, value):
    await register_user({
        "username": "cinephile",
        "email": "cinephile@example.com",
        "password": "StrongPassword123!",
    })
    payload = {
        "username": "someoneelse",
        "email": "someoneelse@example.com",
        "password": "StrongPassword123!",
    }
    payload[field] = value

    response = await client.post("/api/register", json=payload)

    assert response.status_code == 409
    assert response.json()["detail"] == "A user with this username or email already exists."


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "ab", "email": "ok@example.com", "password": "StrongPassword123!"},
        {"username": "valid_name", "email": "not-an-email", "password": "StrongPassword123!"},
        {"username": "valid_name", "email": "ok@example.com", "password": "weak"},
        {"username": "valid_name", "email": "ok@example.com"},
    ],
)
@pytest.mark.asyncio
async def test_register_invalid_payload(client, payload):
    response = await client.post("/api/register", json=payload)

    assert response.status_code == 400
    assert isinstance(response.json()["detail"], str)


@pytest.mark.asyncio
async def test_login_success_stores_refresh_token(client, register_user, db_session):
    await register_user()

    response = await client.post(
        "/api/login",
        json={"username": "testuser", "password": "StrongPassword123!"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["tokenType"] == "bearer"
    assert data["accessToken"]

    result = await db_session.execute(
        select(RefreshTokenModel).where(
            RefreshTokenModel.token == data["refreshToken"]
        )
    )
    assert result.scalars().first() is not None


@pytest.mark.parametrize(
    "credentials",
    [
        {"username": "testuser", "password": "WrongPassword123!"},
        {"username": "nobody", "password": "StrongPassword123!"},
    ],
)
@pytest.mark.asyncio
async def test_login_invalid_credentials(client, register_user, credentials):
    await register_user()

    response = await client.post("/api/login", json=credentials)

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid username or password."


@pytest.mark.asyncio
async def test_refresh_access_token(client, create_login_user, jwt_manager):
    user_data = await create_login_user()

    response = await client.post(
        "/api/token/refresh",
        json={"refreshToken": user_data["refresh_token"]},
    )

    assert response.status_code == 200
    access_token = response.json()["accessToken"]
    payload = jwt_manager.decode_access_token(access_token)
    assert payload["user_id"] == user_data["user"]["id"]


@pytest.mark.asyncio
async def test_refresh_with_unknown_token(client, create_login_user, jwt_manager):
    user_data = await create_login_user()
    unknown = jwt_manager.create_refresh_token({"user_id": user_data["user"]["id"]})

    response = await client.post(
        "/api/token/refresh", json={"refreshToken": unknown}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Refresh token not found."


@pytest.mark.asyncio
async def test_refresh_with_invalid_token(client):
    response = await client.post(
        "/api/token/refresh", json={"refreshToken": "garbage"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid token"


@pytest.mark.asyncio
async def test_logout_revokes_refresh_token(client, create_login_user):
    user_data = await create_login_user()

    response = await client.post(
        "/api/logout", json={"refreshToken": user_data["refresh_token"]}
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Logout successful."

    response = await client.post(
        "/api/token/refresh",
        json={"refreshToken": user_data["refresh_token"]},
    )
    assert response.status_code == 401

    response = await client.post(
        "/api/logout", json={"refreshToken": user_data["refresh_token"]}
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_register_rejects_username_with_trailing_newline(client, register_user):
    await register_user({
        "username": "alice",
        "email": "alice@example.com",
        "password": "StrongPassword123!",
    })

    response = await client.post("/api/register", json={
        "username": "alice\n",
        "email": "alice2@example.com",
        "password": "StrongPassword123!",
    })

    assert response.status_code == 400
    assert response.json()["detail"].startswith("username:")


@pytest.mark.asyncio
async def test_get_user_by_email_ignores_case(register_user, db_session):
    registered = await register_user()

    user = await users_crud.get_user_by_email(db_session, "TestUser@Example.com")

    assert user is not None
    assert user.id == registered["id"]
    assert await users_crud.get_user_by_email(db_session, "nobody@example.com") is None
