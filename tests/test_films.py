"""Tests for film CRUD and validation over HTTP."""

from __future__ import annotations

import pytest

from tests.helpers import create_film, film_payload, ids


async def test_create_film_returns_hydrated_film(client):
    film = await create_film(client, 1, genres=[{"id": 2}], mpa={"id": 3})
    assert film["id"] == 1
    assert film["releaseDate"] == "2000-01-01"
    assert film["genres"] == [{"id": 2, "name": "Drama"}]
    assert film["mpa"] == {"id": 3, "name": "PG-13"}
    assert film["likes"] == []


async def test_release_date_boundary(client):
    r = await client.post("/films",
                          json=film_payload(1, releaseDate="1895-12-27"))
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "validation_failed"

    r = await client.post("/films",
                          json=film_payload(1, releaseDate="1895-12-28"))
    assert r.status_code == 200


async def test_description_length_boundary(client):
    r = await client.post("/films", json=film_payload(1,
                                                      description="x" * 201))
    assert r.status_code == 400

    r = await client.post("/films", json=film_payload(1,
                                                      description="x" * 200))
    assert r.status_code == 200


@pytest.mark.parametrize("override", [
    {"name": ""},
    {"name": "   "},
    {"duration": 0},
    {"duration": -5},
    {"releaseDate": "not-a-date"},
])
async def test_invalid_film_fields_return_400(client, override):
    r = await client.post("/films", json=film_payload(1, **override))
    assert r.status_code == 400


async def test_invalid_film_is_not_stored(client):
    await client.post("/films", json=film_payload(1, duration=0))
    assert (await client.get("/films")).json() == []


async def test_duplicate_genres_are_deduplicated_and_sorted(client):
    film = await create_film(client, 1, genres=[
        {"id": 3}, {"id": 1}, {"id": 3}, {"id": 1, "name": "whatever"},
    ])
    assert film["genres"] == [
        {"id": 1, "name": "Comedy"},
        {"id": 3, "name": "Animation"},
    ]


async def test_unknown_genre_returns_404(client):
    r = await client.post("/films", json=film_payload(1, genres=[{"id": 99}]))
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "genre_not_found"
    assert (await client.get("/films")).json() == []


async def test_unknown_mpa_returns_404(client):
    r = await client.post("/films", json=film_payload(1, mpa={"id": 42}))
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "mpa_not_found"


async def test_film_without_mpa_is_accepted(client):
    film = await create_film(client, 1, mpa=None)
    assert film["mpa"] is None


async def test_get_film_by_id_and_missing(client):
    await create_film(client, 1)
    r = await client.get("/films/1")
    assert r.status_code == 200 and r.json()["name"] == "Film 1"

    assert (await client.get("/films/17")).status_code == 404
    assert (await client.get("/films/abc")).status_code == 400


async def test_update_film_replaces_genres(client):
    await create_film(client, 1, genres=[{"id": 1}])
    r = await client.put("/films", json=film_payload(
        1, id=1, name="New name", genres=[{"id": 6}]))
    assert r.status_code == 200
    assert r.json()["name"] == "New name"
    assert r.json()["genres"] == [{"id": 6, "name": "Action"}]


async def test_update_unknown_film_returns_404(client):
    r = await client.put("/films", json=film_payload(1, id=5))
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "film_not_found"


async def test_create_with_existing_id_returns_409(client):
    await create_film(client, 1)
    r = await client.post("/films", json=film_payload(2, id=1))
    assert r.status_code == 409


async def test_get_all_films_sorted_by_id(client):
    for n in range(1, 4):
        await create_film(client, n)
    assert ids((await client.get("/films")).json()) == [1, 2, 3]


async def test_delete_all_films_resets_sequence(client):
    await create_film(client, 1)
    await create_film(client, 2)
    r = await client.delete("/films")
    assert r.json() == {"deleted": 2}
    film = await create_film(client, 3)
    assert film["id"] == 1


async def test_delete_film_by_id(client):
    await create_film(client, 1)
    r = await client.delete("/films/1")
    assert r.json() == {"ok": True, "deleted": True}
    assert (await client.get("/films/1")).status_code == 404


async def test_invalid_update_leaves_stored_film_unchanged(client):
    before = await create_film(client, 1, genres=[{"id": 1}])
    r = await client.put("/films", json=film_payload(
        1, id=1, name="Changed", genres=[{"id": 99}]))
    assert r.status_code == 404
    assert (await client.get("/films/1")).json() == before

    r = await client.put("/films", json=film_payload(
        1, id=1, name="Changed", releaseDate="1800-01-01"))
    assert r.status_code == 400
    assert (await client.get("/films/1")).json() == before
