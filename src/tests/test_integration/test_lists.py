import pytest
from sqlalchemy import select, func

from database import ListItemModel


async def create_list(client, headers, **fields):
    payload = {"name": "Noir essentials", **fields}
    response = await client.post("/api/lists", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_list_defaults_to_public(client, create_login_user):
    user_data = await create_login_user()

    movie_list = await create_list(
        client, user_data["headers"], description="Shadows and rain"
    )

    assert movie_list["isPublic"] is True
    assert movie_list["userId"] == user_data["user"]["id"]
    assert movie_list["description"] == "Shadows and rain"


@pytest.mark.asyncio
async def test_create_list_requires_name(client, create_login_user):
    headers = (await create_login_user())["headers"]

    response = await client.post("/api/lists", headers=headers, json={"name": ""})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_private_list_is_hidden_from_others(client, create_login_user):
    owner = await create_login_user("owner")
    stranger = await create_login_user("stranger")
    movie_list = await create_list(client, owner["headers"], isPublic=False)
    url = f"/api/lists/{movie_list['id']}"

    response = await client.get(url, headers=owner["headers"])
    assert response.status_code == 200

    response = await client.get(url, headers=stranger["headers"])
    assert response.status_code == 403
    assert response.json()["detail"] == "This list is private"

    response = await client.get(url)
    assert response.status_code == 403

    response = await client.get(f"{url}/items")
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_user_lists_show_private_only_to_owner(client, create_login_user):
    owner = await create_login_user("owner")
    await create_list(client, owner["headers"], name="Public one")
    await create_list(client, owner["headers"], name="Secret one", isPublic=False)
    url = f"/api/user/{owner['user']['id']}/lists"

    response = await client.get(url)
    assert [item["name"] for item in response.json()] == ["Public one"]

    response = await client.get(url, headers=owner["headers"])
    assert [item["name"] for item in response.json()] == ["Public one", "Secret one"]

    response = await client.get("/api/lists", headers=owner["headers"])
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_update_list(client, create_login_user):
    headers = (await create_login_user())["headers"]
    movie_list = await create_list(client, headers)

    response = await client.patch(
        f"/api/lists/{movie_list['id']}",
        headers=headers,
        json={"name": "Neo-noir", "isPublic": False},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Neo-noir"
    assert response.json()["isPublic"] is False
    assert response.json()["description"] is None


@pytest.mark.asyncio
async def test_update_list_rejects_null_name(client, create_login_user):
    headers = (await create_login_user())["headers"]
    movie_list = await create_list(client, headers)

    response = await client.patch(
        f"/api/lists/{movie_list['id']}", headers=headers, json={"name": None}
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_only_owner_modifies_list(client, create_login_user):
    owner = await create_login_user("owner")
    stranger = await create_login_user("stranger")
    movie_list = await create_list(client, owner["headers"])
    url = f"/api/lists/{movie_list['id']}"

    response = await client.patch(url, headers=stranger["headers"], json={"name": "Mine"})
    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized"

    response = await client.post(
        f"{url}/items", headers=stranger["headers"], json={"movieId": 1}
    )
    assert response.status_code == 403

    response = await client.delete(url, headers=stranger["headers"])
    assert response.status_code == 403

    response = await client.get(url)
    assert response.json()["name"] == "Noir essentials"


@pytest.mark.asyncio
async def test_missing_list(client, create_login_user):
    headers = (await create_login_user())["headers"]

    response = await client.get("/api/lists/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "List not found"

    response = await client.delete("/api/lists/999", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_items(client, create_login_user):
    headers = (await create_login_user())["headers"]
    movie_list = await create_list(client, headers)
    url = f"/api/lists/{movie_list['id']}/items"

    response = await client.post(
        url, headers=headers, json={"movieId": 42, "notes": "Start here"}
    )
    assert response.status_code == 201
    assert response.json()["notes"] == "Start here"
    await client.post(url, headers=headers, json={"movieId": 7})

    response = await client.post(url, headers=headers, json={"movieId": 42})
    assert response.status_code == 400
    assert response.json()["detail"] == "Movie already in list"

    response = await client.get(url)
    assert [item["movieId"] for item in response.json()] == [42, 7]

    response = await client.delete(f"{url}/42", headers=headers)
    assert response.status_code == 204

    response = await client.get(url)
    assert [item["movieId"] for item in response.json()] == [7]


@pytest.mark.asyncio
async def test_same_movie_in_two_lists(client, create_login_user):
    headers = (await create_login_user())["headers"]
    first = await create_list(client, headers, name="First")
    second = await create_list(client, headers, name="Second")

    for movie_list in (first, second):
        response = await client.post(
            f"/api/lists/{movie_list['id']}/items",
            headers=headers,
            json={"movieId": 42},
        )
        assert response.status_code == 201


@pytest.mark.asyncio
async def test_delete_list_removes_items(client, create_login_user, db_session):
    headers = (await create_login_user())["headers"]
    movie_list = await create_list(client, headers)
    for movie_id in (1, 2, 3):
        await client.post(
            f"/api/lists/{movie_list['id']}/items",
            headers=headers,
            json={"movieId": movie_id},
        )

    response = await client.delete(f"/api/lists/{movie_list['id']}", headers=headers)
    assert response.status_code == 204

    response = await client.get(f"/api/lists/{movie_list['id']}")
    assert response.status_code == 404

    result = await db_session.execute(
        select(func.count(ListItemModel.id)).where(
            ListItemModel.list_id == movie_list["id"]
        )
    )
    assert result.scalar_one() == 0
