"""Tests for likes API flows and the popular films ranking."""

from __future__ import annotations

import pytest

from tests.helpers import create_film, create_user, film_payload, ids


async def _like(client, film_id: int, user_id: int) -> dict:
    r = await client.put(f"/films/{film_id}/like/{user_id}")
    assert r.status_code == 200, r.text
    return r.json()


async def test_like_twice_keeps_single_like(client):
    await create_film(client, 1)
    assert await _like(client, 1, 7) == {"ok": True, "created": True}
    assert await _like(client, 1, 7) == {"ok": True, "created": False}

    film = (await client.get("/films/1")).json()
    assert film["likes"] == [7]

    r = await client.get("/films/1/likes")
    assert r.json() == {"film_id": 1, "user_ids": [7], "total": 1}


async def test_like_unknown_film_returns_404(client):
    r = await client.put("/films/3/like/1")
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "film_not_found"


@pytest.mark.parametrize("user_id", [0, -1])
async def test_like_with_non_positive_user_returns_404(client, user_id):
    await create_film(client, 1)
    r = await client.put(f"/films/1/like/{user_id}")
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "user_not_found"


async def test_like_with_non_numeric_user_returns_400(client):
    await create_film(client, 1)
    r = await client.put("/films/1/like/abc")
    assert r.status_code == 400


async def test_delete_like_is_idempotent(client):
    await create_film(client, 1)
    await _like(client, 1, 2)

    r = await client.delete("/films/1/like/2")
    assert r.status_code == 200 and r.json() == {"ok": True, "deleted": True}
    r = await client.delete("/films/1/like/2")
    assert r.status_code == 200 and r.json() == {"ok": True, "deleted": False}
    assert (await client.get("/films/1")).json()["likes"] == []


async def test_popular_orders_by_likes_then_id(client):
    for n in range(1, 5):
        await create_film(client, n)
    # film 3: 3 likes, film 2 and 4: 1 like each, film 1: none
    for user_id in (1, 2, 3):
        await _like(client, 3, user_id)
    await _like(client, 4, 1)
    await _like(client, 2, 5)

    r = await client.get("/films/popular?count=10")
    assert r.status_code == 200
    assert ids(r.json()) == [3, 2, 4, 1]

    r = await client.get("/films/popular?count=2")
    assert ids(r.json()) == [3, 2]


async def test_popular_default_count_is_ten(client):
    for n in range(1, 13):
        await create_film(client, n)
    r = await client.get("/films/popular")
    assert ids(r.json()) == list(range(1, 11))


@pytest.mark.parametrize("count", ["0", "-3", "ten", "1.5"])
async def test_popular_with_bad_count_returns_400(client, count):
    r = await client.get(f"/films/popular?count={count}")
    assert r.status_code == 400


async def test_update_film_replaces_likes(client):
    await create_film(client, 1)
    await _like(client, 1, 1)
    r = await client.put("/films", json=film_payload(1, id=1, likes=[4, 5]))
    assert r.status_code == 200
    assert r.json()["likes"] == [4, 5]


async def test_delete_film_drops_its_likes(client):
    await create_film(client, 1)
    await _like(client, 1, 1)
    await client.delete("/films/1")
    await create_film(client, 2)
    assert (await client.get("/films/2")).json()["likes"] == []


async def test_delete_user_drops_their_likes(client):
    await create_user(client, 1)
    await create_user(client, 2)
    await create_film(client, 1)
    await _like(client, 1, 1)
    await _like(client, 1, 2)

    await client.delete("/users/1")
    assert (await client.get("/films/1")).json()["likes"] == [2]
