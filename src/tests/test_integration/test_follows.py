import pytest


@pytest.mark.asyncio
async def test_follow_and_unfollow(client, create_login_user):
    follower = await create_login_user("follower")
    star = await create_login_user("star")
    star_id = star["user"]["id"]

    response = await client.post(
        "/api/follow", headers=follower["headers"], json={"followingId": star_id}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["followerId"] == follower["user"]["id"]
    assert data["followingId"] == star_id

    response = await client.get(
        f"/api/follow/{star_id}/status", headers=follower["headers"]
    )
    assert response.json() == {"isFollowing": True}

    response = await client.delete(
        f"/api/follow/{star_id}", headers=follower["headers"]
    )
    assert response.status_code == 204

    response = await client.get(
        f"/api/follow/{star_id}/status", headers=follower["headers"]
    )
    assert response.json() == {"isFollowing": False}


@pytest.mark.asyncio
async def test_cannot_follow_yourself(client, create_login_user):
    user_data = await create_login_user()

    response = await client.post(
        "/api/follow",
        headers=user_data["headers"],
        json={"followingId": user_data["user"]["id"]},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot follow yourself"


@pytest.mark.asyncio
async def test_cannot_follow_missing_user(client, create_login_user):
    user_data = await create_login_user()

    response = await client.post(
        "/api/follow", headers=user_data["headers"], json={"followingId": 999}
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


@pytest.mark.asyncio
async def test_duplicate_follow(client, create_login_user):
    follower = await create_login_user("follower")
    star = await create_login_user("star")
    payload = {"followingId": star["user"]["id"]}
    await client.post("/api/follow", headers=follower["headers"], json=payload)

    response = await client.post(
        "/api/follow", headers=follower["headers"], json=payload
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Already following this user"


@pytest.mark.asyncio
async def test_followers_and_following_lists(client, create_login_user):
    first = await create_login_user("first")
    second = await create_login_user("second")
    star = await create_login_user("star")
    star_id = star["user"]["id"]
    for fan in (first, second):
        await client.post(
            "/api/follow", headers=fan["headers"], json={"followingId": star_id}
        )

    response = await client.get("/api/followers", headers=star["headers"])
    assert [f["followerId"] for f in response.json()] == [
        first["user"]["id"], second["user"]["id"]
    ]

    response = await client.get("/api/following", headers=first["headers"])
    assert [f["followingId"] for f in response.json()] == [star_id]

    response = await client.get(f"/api/user/{star_id}/followers")
    assert len(response.json()) == 2

    response = await client.get(f"/api/user/{star_id}/following")
    assert response.json() == []
