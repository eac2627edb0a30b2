"""Tests for /films routes."""

from __future__ import annotations

from tests.helpers import create_film, create_user, film_payload


async def test_list_films_initially_empty(client):
    r = await client.get("/films")
    assert r.status_code == 200
    assert r.json() == []


async def test_create_film_returns_201_with_id_and_camel_case(client):
    r = await client.post("/films", json=film_payload(name="Matrix"))
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == 1
    assert body["name"] == "Matrix"
    assert body["releaseDate"] == "2000-01-01"
    assert body["likes"] == []


async def test_create_then_get_by_id_round_trip(client):
    created = await create_film(client)
    r = await client.get(f"/films/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


async def test_get_unknown_film_returns_404_with_error_body(client):
    r = await client.get("/films/999")
    assert r.status_code == 404
    assert "999" in r.json()["error"]


async def test_create_film_with_early_release_date_returns_400(client):
    r = await client.post("/films",
                          json=film_payload(releaseDate="1895-12-27"))
    assert r.status_code == 400
    assert "error" in r.json()


async def test_create_film_with_zero_duration_returns_400(client):
    r = await client.post("/films", json=film_payload(duration=0))
    assert r.status_code == 400


async def test_create_film_missing_field_returns_400(client):
    body = film_payload()
    del body["name"]
    r = await client.post("/films", json=body)
    assert r.status_code == 400
    assert "name" in r.json()["error"]


async def test_update_film_partial(client):
    film = await create_film(client, description="Keep me")
    r = await client.put("/films", json={"id": film["id"], "name": "New"})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "New"
    assert body["description"] == "Keep me"
    assert body["duration"] == film["duration"]


async def test_update_unknown_film_returns_404(client):
    r = await client.put("/films", json={"id": 77, "name": "x"})
    assert r.status_code == 404


async def test_update_film_with_bad_date_returns_400(client):
    film = await create_film(client)
    r = await client.put("/films", json={"id": film["id"],
                                         "releaseDate": "1700-01-01"})
    assert r.status_code == 400


async def test_like_and_unlike_flow(client):
    film = await create_film(client)
    user = await create_user(client)
    url = f"/films/{film['id']}/like/{user['id']}"

    assert (await client.put(url)).status_code == 204
    assert (await client.put(url)).status_code == 204
    r = await client.get(f"/films/{film['id']}")
    assert r.json()["likes"] == [user["id"]]

    assert (await client.delete(url)).status_code == 204
    r = await client.get(f"/films/{film['id']}")
    assert r.json()["likes"] == []


async def test_like_by_unknown_user_returns_404(client):
    film = await create_film(client)
    r = await client.put(f"/films/{film['id']}/like/5")
    assert r.status_code == 404


async def test_like_unknown_film_returns_404(client):
    user = await create_user(client)
    r = await client.delete(f"/films/3/like/{user['id']}")
    assert r.status_code == 404


async def test_popular_films_order_and_count(client):
    films = [await create_film(client, name=n) for n in ("a", "b", "c")]
    users = [await create_user(client) for _ in range(2)]
    for u in users:
        await client.put(f"/films/{films[2]['id']}/like/{u['id']}")
    await client.put(f"/films/{films[1]['id']}/like/{users[0]['id']}")

    r = await client.get("/films/popular", params={"count": 2})
    assert r.status_code == 200
    assert [f["name"] for f in r.json()] == ["c", "b"]

    r = await client.get("/films/popular")
    assert [f["name"] for f in r.json()] == ["c", "b", "a"]


async def test_popular_films_with_negative_count_uses_default(client):
    for _ in range(3):
        await create_film(client)
    r = await client.get("/films/popular?count=-1")
    assert r.status_code == 200
    assert len(r.json()) == 3
