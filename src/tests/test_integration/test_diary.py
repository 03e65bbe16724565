import pytest


async def log_watch(client, headers, **fields):
    payload = {"movieId": 42, **fields}
    response = await client.post("/api/diary", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_diary_allows_rewatches(client, create_login_user):
    headers = (await create_login_user())["headers"]

    first = await log_watch(client, headers, rating=3)
    second = await log_watch(
        client, headers, rating=5, watchedDate="2024-05-01T20:00:00Z"
    )

    assert first["id"] != second["id"]
    assert second["watchedAt"].startswith("2024-05-01T20:00:00")

    response = await client.get("/api/diary", headers=headers)
    assert [entry["rating"] for entry in response.json()] == [3, 5]

    response = await client.get("/api/diary/42/status", headers=headers)
    assert response.json() == {"watched": True}


@pytest.mark.parametrize("rating", [0, 6, "five"])
@pytest.mark.asyncio
async def test_diary_rejects_invalid_rating(client, create_login_user, rating):
    headers = (await create_login_user())["headers"]

    response = await client.post(
        "/api/diary", headers=headers, json={"movieId": 42, "rating": rating}
    )

    assert response.status_code == 400
    assert "rating" in response.json()["detail"]


@pytest.mark.asyncio
async def test_owner_updates_entry(client, create_login_user):
    headers = (await create_login_user())["headers"]
    entry = await log_watch(client, headers, rating=2)

    response = await client.patch(
        f"/api/diary/{entry['id']}",
        headers=headers,
        json={"rating": 4, "review": "Better the second time", "liked": True},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["rating"] == 4
    assert data["review"] == "Better the second time"
    assert data["liked"] is True
    assert data["movieId"] == 42


@pytest.mark.asyncio
async def test_owner_can_clear_rating(client, create_login_user):
    headers = (await create_login_user())["headers"]
    entry = await log_watch(client, headers, rating=2)

    response = await client.patch(
        f"/api/diary/{entry['id']}", headers=headers, json={"rating": None}
    )

    assert response.status_code == 200
    assert response.json()["rating"] is None


@pytest.mark.asyncio
async def test_non_owner_cannot_touch_entry(client, create_login_user):
    owner = await create_login_user("owner")
    intruder = await create_login_user("intruder")
    entry = await log_watch(client, owner["headers"], rating=2)

    response = await client.patch(
        f"/api/diary/{entry['id']}",
        headers=intruder["headers"],
        json={"rating": 1},
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized"

    response = await client.delete(
        f"/api/diary/{entry['id']}", headers=intruder["headers"]
    )
    assert response.status_code == 403

    response = await client.get("/api/diary", headers=owner["headers"])
    assert response.json()[0]["rating"] == 2


@pytest.mark.asyncio
async def test_missing_entry(client, create_login_user):
    headers = (await create_login_user())["headers"]

    response = await client.patch(
        "/api/diary/999", headers=headers, json={"rating": 1}
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Diary entry not found"

    response = await client.delete("/api/diary/999", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_entry(client, create_login_user):
    headers = (await create_login_user())["headers"]
    entry = await log_watch(client, headers)

    response = await client.delete(f"/api/diary/{entry['id']}", headers=headers)
    assert response.status_code == 204

    response = await client.get("/api/diary/42/status", headers=headers)
    assert response.json() == {"watched": False}


@pytest.mark.asyncio
async def test_unmark_watched_removes_every_entry_for_movie(client, create_login_user):
    headers = (await create_login_user())["headers"]
    await log_watch(client, headers)
    await log_watch(client, headers)
    await log_watch(client, headers, movieId=7)

    response = await client.delete("/api/diary/movie/42", headers=headers)
    assert response.status_code == 204

    response = await client.get("/api/diary", headers=headers)
    assert [entry["movieId"] for entry in response.json()] == [7]


@pytest.mark.asyncio
async def test_user_diary_is_public(client, create_login_user):
    owner = await create_login_user("owner")
    await log_watch(client, owner["headers"], review="Loved it")

    response = await client.get(f"/api/user/{owner['user']['id']}/diary")

    assert response.status_code == 200
    assert response.json()[0]["review"] == "Loved it"
