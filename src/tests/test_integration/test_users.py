import pytest


@pytest.mark.asyncio
async def test_get_current_user(client, create_login_user):
    user_data = await create_login_user("watcher")

    response = await client.get("/api/user", headers=user_data["headers"])

    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "watcher"
    assert data["email"] == "watcher@example.com"
    assert data["bio"] is None
    assert "createdAt" in data


@pytest.mark.asyncio
async def test_get_current_user_without_token(client):
    response = await client.get("/api/user")

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


@pytest.mark.parametrize(
    "authorization",
    ["Bearer broken.token.value", "Token something", "Bearer"],
)
@pytest.mark.asyncio
async def test_get_current_user_with_bad_header(client, authorization):
    response = await client.get(
        "/api/user", headers={"Authorization": authorization}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user_with_expired_token(client, create_login_user, jwt_manager):
    from datetime import timedelta

    user_data = await create_login_user()
    token = jwt_manager.create_access_token(
        {"user_id": user_data["user"]["id"]},
        expires_delta=timedelta(seconds=-5),
    )

    response = await client.get(
        "/api/user", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Token has expired."


@pytest.mark.asyncio
async def test_update_profile(client, create_login_user):
    user_data = await create_login_user()

    response = await client.patch(
        "/api/user",
        headers=user_data["headers"],
        json={"bio": "Mostly noir.", "avatarUrl": "https://img.example.com/a.png"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["bio"] == "Mostly noir."
    assert data["avatarUrl"] == "https://img.example.com/a.png"
    assert data["username"] == "user"


@pytest.mark.asyncio
async def test_update_profile_to_taken_username(client, create_login_user):
    await create_login_user("taken")
    user_data = await create_login_user("mover")

    response = await client.patch(
        "/api/user", headers=user_data["headers"], json={"username": "taken"}
    )

    assert response.status_code == 409

    response = await client.get("/api/user", headers=user_data["headers"])
    assert response.json()["username"] == "mover"


@pytest.mark.parametrize(
    "payload",
    [{"username": None}, {"email": "bad"}, {"unknownField": 1}],
)
@pytest.mark.asyncio
async def test_update_profile_invalid_payload(client, create_login_user, payload):
    user_data = await create_login_user()

    response = await client.patch(
        "/api/user", headers=user_data["headers"], json=payload
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_user_by_username(client, create_login_user):
    await create_login_user("public_face")

    response = await client.get("/api/user/public_face")

    assert response.status_code == 200
    assert response.json()["username"] == "public_face"


@pytest.mark.asyncio
async def test_get_unknown_user_by_username(client):
    response = await client.get("/api/user/ghost")

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"
